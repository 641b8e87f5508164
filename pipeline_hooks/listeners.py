"""Listener forms accepted by the dispatcher.

A listener is registered as one of three things:

- a plain callable ``(event, context, additional_payload)``,
- an object with a ``handle(event, context, additional_payload)`` method,
- a class path string or a handler class, handed to the dispatcher's
  resolver every time the listener is reached during a dispatch. Handler
  classes are kept as class objects, so classes that cannot be imported by
  path (defined inside a function, for example) still resolve.

``make_listener()`` wraps each form into a callable with the same call
signature so the dispatch loop never has to look at the form again.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from loguru import logger

from .exceptions import InvalidHookHandlerError
from .types import HookInterface, type_identity

Resolver = Callable[[Union[str, type]], Any]


def has_handle(obj: Any) -> bool:
    """Whether ``obj`` offers a callable ``handle`` attribute."""
    return not isinstance(obj, type) and callable(getattr(obj, "handle", None))


@dataclass(frozen=True)
class DirectListener:
    """A plain function or closure."""

    func: Callable[..., Any]

    def __call__(self, event: HookInterface, context: Optional[str], additional_payload: Any) -> Any:
        return self.func(event, context, additional_payload)


@dataclass(frozen=True)
class HandlerListener:
    """An object implementing ``handle``."""

    handler: Any

    def __call__(self, event: HookInterface, context: Optional[str], additional_payload: Any) -> Any:
        return self.handler.handle(event, context, additional_payload)


@dataclass(frozen=True)
class DeferredListener:
    """A class path or handler class resolved lazily on each invocation."""

    target: Union[str, type]
    resolver: Resolver

    @property
    def type_identifier(self) -> str:
        return self.target if isinstance(self.target, str) else type_identity(self.target)

    def __call__(self, event: HookInterface, context: Optional[str], additional_payload: Any) -> Any:
        handler = self.resolver(self.target)
        logger.debug(f"Deferred listener '{self.type_identifier}' resolved to {type(handler).__name__}")
        if not has_handle(handler):
            raise InvalidHookHandlerError(
                f"Listener class '{self.type_identifier}' resolved to an object without a handle() method!"
            )
        return handler.handle(event, context, additional_payload)


Listener = Union[DirectListener, HandlerListener, DeferredListener]


def make_listener(listener: Any, resolver: Resolver) -> Listener:
    """Normalize a listener given to ``listen()``.

    Handler objects are checked before plain callables, so an object that is
    both callable and has ``handle`` is invoked through ``handle``.

    Raises:
        InvalidHookHandlerError: If ``listener`` matches none of the accepted forms.
    """
    if isinstance(listener, (DirectListener, HandlerListener, DeferredListener)):
        return listener
    if isinstance(listener, str):
        if not listener:
            raise InvalidHookHandlerError("The given listener is not valid! (empty class path)")
        return DeferredListener(listener, resolver)
    if isinstance(listener, type) and callable(getattr(listener, "handle", None)):
        return DeferredListener(listener, resolver)
    if has_handle(listener):
        return HandlerListener(listener)
    if callable(listener) and not isinstance(listener, type):
        return DirectListener(listener)

    raise InvalidHookHandlerError(f"The given listener is not valid! ({type(listener).__name__})")
