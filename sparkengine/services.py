"""A global registry of single-instance services keyed by their type."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar


class Service:
    """Base class for anything the service locator may hold."""


class ServiceNotFoundError(RuntimeError):
    """Raised when a requested service has not been provided."""


S = TypeVar("S", bound=Service)


def _check_service_type(service_type: type) -> None:
    if not (isinstance(service_type, type) and issubclass(service_type, Service)):
        raise TypeError(f"{service_type!r} must be a subclass of Service")


class ServiceLocator:
    """Creates, hands out and forgets services, one instance per type."""

    _services: ClassVar[dict[type, Service]] = {}

    def __init__(self) -> None:
        raise TypeError("ServiceLocator is not meant to be instantiated")

    @classmethod
    def provide(cls, service_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Return the registered instance, constructing it from the arguments if absent."""
        _check_service_type(service_type)
        if service_type not in cls._services:
            cls._services[service_type] = service_type(*args, **kwargs)
        return cls._services[service_type]  # type: ignore[return-value]

    @classmethod
    def get(cls, service_type: type[S]) -> S:
        """Return the registered instance or raise ServiceNotFoundError."""
        _check_service_type(service_type)
        try:
            return cls._services[service_type]  # type: ignore[return-value]
        except KeyError:
            raise ServiceNotFoundError("Service does not exist") from None

    @classmethod
    def unregister(cls, service_type: type[Service]) -> None:
        """Forget the instance of ``service_type``, if any."""
        _check_service_type(service_type)
        cls._services.pop(service_type, None)