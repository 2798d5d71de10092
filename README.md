# sparkengine

A small game engine core built on pygame. It provides the pieces an
application loop needs:

- `sparkengine.eventing.Event` – a multicast event: `add_listener` returns an
  integer id, `remove_listener(id)` returns whether a listener was removed,
  `remove_all_listeners()` clears them, `invoke(*args)` calls every listener,
  and `len(event)` counts them.
- `sparkengine.services` – `Service` is the base class for services;
  `ServiceLocator` keeps one instance per service type. `provide(type, *args,
  **kwargs)` creates the instance on first use and returns it afterwards,
  `get(type)` returns it or raises `ServiceNotFoundError`, and
  `unregister(type)` forgets it. Types that are not `Service` subclasses raise
  `TypeError`.
- `sparkengine.timing` – `get_date()` (`YYYY-MM-DD`), `get_time()`
  (`HH:MM:SS`) and `get_date_and_time()` in local time, and `GlobalClock`, a
  service with `start()`, `update_delta()` and the properties `delta_ms` and
  `duration_ms`, measured with a monotonic clock to whole microseconds.
- `sparkengine.utils` – `get_file_name(path)` returns the last path component
  without its extension (`""` when there is none), and `seed`, `get_int` and
  `get_float` draw from one shared random generator. `get_int` includes both
  bounds; `get_float` raises `ValueError` when the minimum exceeds the maximum.
- `sparkengine.logger` – `LogLevel` and `Logger`, whose class methods `debug`,
  `info`, `warning` and `error` take printf-style formats. Each message is
  written with a colour, a level tag and a timestamp to `Logger.stream`
  (standard output when unset) and then passed as `(level, message)` to the
  listeners of `Logger.message_received`.
- `sparkengine.inputs` – the `Key`, `KeyState`, `MouseButton`,
  `MouseButtonState`, `CursorMode` and `CursorShape` enumerations.
- `sparkengine.settings.WindowSettings` – a dataclass of window options with
  defaults (1280×720, titled "Engine", `DONT_CARE` = -1 for unset limits and
  position). Negative `samples` or pairs without two components raise
  `ValueError`.
- `sparkengine.input_manager.InputManager` – key and mouse button state
  queries, cursor position, cursor mode (normal, hidden, disabled/grabbed) and
  cursor shape, plus events for key presses and releases, mouse button
  presses and releases, and cursor movement. Usable as a context manager.
- `sparkengine.window.Window` – a pygame window and `Service`. Its properties
  include `size`, `position`, `framebuffer_size`, `minimum_size`,
  `maximum_size`, `title`, `vsync`, `fullscreen`, `should_close`, `visible`,
  `hidden`, `maximized`, `minimized`, `focused`, `resizable`, `decorated` and
  `input_manager`. `poll_events()` turns pending pygame events into the
  window's `resize_event`, `move_event`, `framebuffer_resize_event`,
  `minimize_event`, `maximize_event`, `lost_focus_event`, `gain_focus_event`
  and `close_event`, and into the input manager's events. Failures raise
  `WindowError`. Usable as a context manager; `close()` drops all listeners
  and shuts the display down.
- `sparkengine.application.Application` – provides a `GlobalClock` and a
  `Window` through the service locator, and `run()` updates the clock and
  polls window events until the window should close. `close()` (or leaving a
  `with` block) closes the window and unregisters both services.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
sparkengine
```

This opens the engine window and runs the loop until it is closed. If
start-up fails, the error is logged and the command returns -1.

## Using the pieces

```python
from sparkengine.eventing import Event
from sparkengine.logger import Logger

resized = Event()
listener_id = resized.add_listener(lambda size: Logger.info("resized to %dx%d", *size))
resized.invoke((800, 600))
resized.remove_listener(listener_id)
```

```python
from sparkengine.services import ServiceLocator
from sparkengine.timing import GlobalClock

clock = ServiceLocator.provide(GlobalClock)
clock.start()
clock.update_delta()
print(clock.delta_ms, clock.duration_ms)
ServiceLocator.unregister(GlobalClock)
```

## What it does not do

There is no rendering: the main loop only updates the clock and dispatches
window and input events, so the window stays blank. Setting `vsync` only
records the flag, and `maximize()`, `restore()` and `focus()` only update the
window's recorded state.