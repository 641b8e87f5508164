"""Synchronous hook dispatcher.

Listeners are registered per hook name and run in registration order
against a dispatched hook. A listener returning exactly ``False`` stops
the propagation; the hook's payload is read again after every listener so
the caller always receives the latest value, whether listeners mutated it
in place or replaced it with ``set_payload()``.
"""

from typing import Any, Callable, Iterable, Optional, Union

from loguru import logger

from .listeners import Listener, Resolver, make_listener
from .resolver import ImportResolver
from .types import HookInterface, type_identity

HookName = Union[str, type]


def _hook_name(name: HookName) -> str:
    return type_identity(name) if isinstance(name, type) else str(name)


def _hook_names(names: Union[HookName, Iterable[HookName]]) -> list[str]:
    if isinstance(names, (str, type)):
        return [_hook_name(names)]
    return [_hook_name(name) for name in names]


class HookDispatcher:
    """Registry of listeners keyed by hook name, plus the dispatch loop.

    Parameters
    ----------
    resolver : callable or object with ``resolve``, optional
        Turns a class path, or a handler class, into a handler instance for
        deferred listeners. Defaults to ``ImportResolver``.
    """

    def __init__(self, resolver: Any = None) -> None:
        if resolver is None:
            resolver = ImportResolver()
        if callable(getattr(resolver, "resolve", None)):
            resolver = resolver.resolve
        elif not callable(resolver):
            raise TypeError(f"resolver must be callable or provide resolve(), got {type(resolver).__name__}")
        self._resolver: Resolver = resolver
        self._listeners: dict[str, list[Listener]] = {}

    def listen(self, names: Union[HookName, Iterable[HookName]], listener: Any) -> "HookDispatcher":
        """Register ``listener`` for one or more hook names.

        Parameters
        ----------
        names : str, hook class, or iterable of those
            Hook names to listen to. Classes stand for their type identity.
        listener : callable, handler object, handler class or class path
            See ``pipeline_hooks.listeners``.

        Raises
        ------
        InvalidHookHandlerError
            If the listener has none of the accepted forms. Nothing is
            registered in that case.
        """
        normalized = make_listener(listener, self._resolver)
        for name in _hook_names(names):
            self._listeners.setdefault(name, []).append(normalized)
            logger.debug(f"Registered {type(normalized).__name__} for hook '{name}'")
        return self

    def on(self, names: Union[HookName, Iterable[HookName]]) -> Callable[[Any], Any]:
        """Decorator form of listen().

        Example:
            @dispatcher.on("order.created")
            def notify(event, context, additional_payload):
                ...
        """

        def decorator(listener: Any) -> Any:
            self.listen(names, listener)
            return listener

        return decorator

    def has_listeners(self, name: HookName) -> bool:
        return bool(self._listeners.get(_hook_name(name)))

    def forget(self, name: HookName) -> "HookDispatcher":
        """Remove every listener registered for ``name``."""
        removed = self._listeners.pop(_hook_name(name), None)
        if removed:
            logger.debug(f"Forgot {len(removed)} listener(s) for hook '{_hook_name(name)}'")
        return self

    def get_listener_count(self, name: HookName) -> int:
        return len(self._listeners.get(_hook_name(name), []))

    def get_registered_hook_count(self) -> int:
        return len(self.registered_hooks())

    def registered_hooks(self) -> list[str]:
        """Names that have at least one listener."""
        return [name for name, chain in self._listeners.items() if chain]

    def get_listeners(self, event: HookInterface) -> list[Listener]:
        """Listeners for ``event``: its name's chain, then its type identity's chain.

        The type identity chain is only added when it differs from the name,
        so a hook that uses its class path as name does not run twice.
        """
        name = event.name
        listeners = list(self._listeners.get(name, []))
        identity = type_identity(event)
        if identity != name:
            listeners.extend(self._listeners.get(identity, []))
        return listeners

    def dispatch(
        self,
        event: HookInterface,
        context: Optional[str] = None,
        additional_payload: Optional[Any] = None,
    ) -> Any:
        """Run the listeners for ``event`` and return the resulting payload.

        Exceptions raised by a listener propagate to the caller and abort the
        remaining listeners.
        """
        if additional_payload is None:
            additional_payload = []

        payload = event.payload
        for listener in self.get_listeners(event):
            try:
                propagating = listener(event, context, additional_payload)
            except Exception as e:
                logger.warning(f"Listener {listener!r} for hook '{event.name}' raised {type(e).__name__}: {e}")
                raise
            payload = event.payload

            if propagating is False:
                logger.debug(f"Propagation of hook '{event.name}' stopped by {listener!r}")
                break

        return payload


_default_dispatcher: Optional[HookDispatcher] = None


def get_dispatcher() -> HookDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = HookDispatcher()
    return _default_dispatcher


def set_dispatcher(dispatcher: Optional[HookDispatcher]) -> None:
    """Replace the process-wide dispatcher; None resets it."""
    global _default_dispatcher
    _default_dispatcher = dispatcher


def hook(event: HookInterface, context: Optional[str] = None, additional_payload: Optional[Any] = None) -> Any:
    """Dispatch ``event`` through the process-wide dispatcher."""
    return get_dispatcher().dispatch(event, context, additional_payload)
