"""Exceptions raised by the hook collection and the hook dispatcher."""

from typing import Optional


class HookError(Exception):
    """Base class for all hook related errors."""


class InvalidHookError(HookError, TypeError):
    """Raised when a value that is not a hook is put into a HookCollection."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or 'The given item is not a valid "HookInterface" instance.')


class HookNotFoundError(HookError, LookupError):
    """Raised by strict lookups when no hook matches the requested name."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f'No hook found matched with name "{name}".')


class InvalidHookHandlerError(HookError, ValueError):
    """Raised when a listener is neither a callable, a handler nor a class path."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "The designated hook handler is not valid!")


class UnsupportedOperationError(HookError, NotImplementedError):
    """Raised by collection operations that make no sense for hook objects."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"This method is not realizable for this collection! ({operation})")
