"""The application that owns the clock and the window and drives the main loop."""

from __future__ import annotations

from pathlib import Path

from .services import ServiceLocator, ServiceNotFoundError
from .settings import WindowSettings
from .timing import GlobalClock
from .window import Window


class Application:
    """Registers the core services and runs until the window asks to close."""

    def __init__(
        self,
        project_path: str | Path,
        window_settings: WindowSettings | None = None,
    ) -> None:
        self.project_path = Path(project_path)
        self.project_shaders_path = self.project_path / "Shaders"
        self._closed = False
        ServiceLocator.provide(GlobalClock).start()
        try:
            ServiceLocator.provide(Window, window_settings or WindowSettings())
        except Exception:
            ServiceLocator.unregister(GlobalClock)
            raise

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def run(self) -> None:
        """Update the clock and poll window events until the window should close."""
        window = ServiceLocator.get(Window)
        clock = ServiceLocator.get(GlobalClock)
        while self.is_running():
            clock.update_delta()
            window.poll_events()

    def is_running(self) -> bool:
        return not ServiceLocator.get(Window).should_close

    def close(self) -> None:
        """Destroy the window and unregister the services this application provided."""
        if self._closed:
            return
        self._closed = True
        try:
            ServiceLocator.get(Window).close()
        except ServiceNotFoundError:
            pass
        ServiceLocator.unregister(Window)
        ServiceLocator.unregister(GlobalClock)