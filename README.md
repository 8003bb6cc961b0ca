# wndframe

The core of a small application framework for windowed programs. It is not
tied to any windowing or graphics backend. It contains these modules:

- **`wndframe.events`**: the `Event` base class, the `EventType` categories
  (`MOUSE`, `KEYBOARD`, `WINDOW`, `CUSTOM`), `CustomEvent` (an event identified
  by `name`), and `EventDispatcher`. `EventDispatcher.dispatch(event_class, func)`
  calls `func` only when the event belongs to the same category as
  `event_class`. The handler's result is OR-ed into `event.handled`, and the
  method returns whether the handler was called.
- **`wndframe.mouse`**: `Mouse` tracks the pointer position (`x`, `y`, `pos`),
  the state of the left and right buttons, and whether the pointer is in the
  window. It keeps the 16 most recent `MouseEvent`s and drops the oldest when
  full. Backends feed it through `on_mouse_move`, `on_left_pressed`,
  `on_wheel_up` and the other `on_*` methods. Consumers use `read()`, which
  returns `None` when the queue is empty, along with `is_empty()` and
  `flush()`. Each `MouseEvent` records its `kind` (a `MouseEventType`) and the
  mouse state at the moment it was queued.
- **`wndframe.keycodes`**: `Key` and `MouseButton`, integer enums of keyboard
  key and mouse button codes.
- **`wndframe.logger`**: three named loggers, `CORE`, `APP` and `LOG`.
  `init(log_file="Framework.log")` attaches a stdout sink and a file sink to
  them. The file is truncated each time. The `LOG` logger drops a message that
  repeats within 5 seconds and reports how many were skipped (see
  `DuplicateFilter`). `log(kind, level, msg, *args)` formats `msg` with
  `str.format` when `args` are given. It raises `RuntimeError` if `init()` has
  not been called. Shortcuts are `core_trace` … `core_critical`, `trace` …
  `critical`, `log_without_duplicates`, and `log_once`, which logs at most
  once per call site.
- **`wndframe.container`**: `Container`, a registry that maps a type to a
  factory. `Container.get()` returns the shared instance. A type with an
  `ioc_params` class attribute is built by calling its factory with a
  parameters object; the default is `ioc_params()`. Any other type is built by
  calling its factory with no arguments. `resolve` raises `ContainerError` when
  no factory is registered or when the factory returns an object of the wrong
  type.
- **`wndframe.errors`**: `FrameworkError`, with subclasses `ContainerError` and
  `WindowError`. Each one carries a `message` and a `type_name`.

## Installation

```
pip install .
```

## Example

```python
from wndframe import logger
from wndframe.events import CustomEvent, EventDispatcher
from wndframe.mouse import Mouse, MouseEvent, MouseEventType

logger.init("framework.log")

mouse = Mouse()
mouse.on_mouse_move(10, 20)
mouse.on_left_pressed()

while (event := mouse.read()) is not None:
    EventDispatcher(event).dispatch(
        MouseEvent, lambda e: e.kind is MouseEventType.L_PRESS
    )
    logger.trace("mouse event {} at {}", event.kind.name, event.pos)

next_layer = CustomEvent("NextLayerEvent")
EventDispatcher(next_layer).dispatch(
    CustomEvent, lambda e: e.name == "NextLayerEvent"
)
assert next_layer.handled
```

### Using the container

```python
from dataclasses import dataclass
from wndframe.container import Container


@dataclass
class ServiceParams:
    title: str = "Untitled"


class Service:
    ioc_params = ServiceParams


class ConsoleService(Service):
    def __init__(self, params):
        self.title = params.title


Container.get().register_factory(Service, ConsoleService)
service = Container.get().resolve(Service, ServiceParams(title="Title"))
```

## What this package does not include

The package has no window, keyboard or graphics classes and no backend that
opens a window or draws. The building blocks it offers are events, mouse state,
input codes, logging and the container. An application supplies its own window
and rendering layer, registers them with `Container`, and can raise
`WindowError` for failures in that layer.

## Running the tests

```
pip install ".[test]"
pytest
```