"""Exception types raised by the framework."""


class FrameworkError(Exception):
    """Base class for every error the framework raises."""

    type_name = "Framework Exception"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ContainerError(FrameworkError):
    """Raised when the dependency container cannot produce an object."""

    type_name = "IoC Exception"


class WindowError(FrameworkError):
    """Raised when a window or its graphics cannot be used."""

    type_name = "Window Exception"