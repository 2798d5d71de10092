"""Settings used to create a window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

DONT_CARE = -1


@dataclass
class WindowSettings:
    """Initial properties of a window; DONT_CARE leaves a value to the system."""

    DONT_CARE: ClassVar[int] = DONT_CARE

    title: str = "Engine"

    size: tuple[int, int] = (1280, 720)
    minimum_size: tuple[int, int] = (DONT_CARE, DONT_CARE)
    maximum_size: tuple[int, int] = (DONT_CARE, DONT_CARE)
    position: tuple[int, int] = (DONT_CARE, DONT_CARE)

    fullscreen: bool = False
    decorated: bool = True
    resizable: bool = False
    focused: bool = True
    maximized: bool = False
    floating: bool = False
    visible: bool = True
    auto_iconify: bool = True

    refresh_rate: int = DONT_CARE
    samples: int = 4

    def __post_init__(self) -> None:
        if self.samples < 0:
            raise ValueError(f"samples must not be negative, got {self.samples}")
        for name in ("size", "minimum_size", "maximum_size", "position"):
            value = tuple(getattr(self, name))
            if len(value) != 2:
                raise ValueError(f"{name} must have two components, got {value!r}")
            setattr(self, name, value)