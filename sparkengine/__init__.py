"""A small game engine core: events, services, timing, logging, input and a pygame window loop."""

__version__ = "0.1.0"