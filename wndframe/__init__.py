"""Core pieces of a windowed application framework: events, mouse input, input codes, logging and an IoC container."""

__version__ = "0.1.0"
__all__ = ["errors", "events", "keycodes", "logger", "mouse", "container"]