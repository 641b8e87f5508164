"""Core hook types: the event object, handler base class and collection keys."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union, runtime_checkable


def type_identity(obj: Any) -> str:
    """Return the dotted ``module.QualName`` path of a class or of an instance's class."""
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


@runtime_checkable
class HookInterface(Protocol):
    """Capability every hook stored in a collection or dispatched must offer.

    ``name`` and ``payload`` are read as attributes (plain or property), not
    called. Collections reject objects whose ``name`` is a method.
    """

    @property
    def name(self) -> str: ...

    @property
    def payload(self) -> Any: ...

    def set_payload(self, payload: Any) -> "HookInterface": ...

    def to_string(self) -> str: ...


class Hook:
    """A named event carrying a mutable payload.

    The name defaults to the type identity of the concrete class. Subclasses
    can give themselves a logical name through the ``hook_name`` class
    attribute, single instances through the ``name`` argument.
    """

    hook_name: Optional[str] = None

    def __init__(self, payload: Any = None, name: Optional[str] = None):
        self._payload = payload
        if name:
            self.hook_name = name

    @property
    def name(self) -> str:
        return self.hook_name or type_identity(self)

    @property
    def payload(self) -> Any:
        return self._payload

    @payload.setter
    def payload(self, value: Any) -> None:
        self._payload = value

    def set_payload(self, payload: Any) -> "Hook":
        """Replace the payload and return the hook for chaining."""
        self._payload = payload
        return self

    def to_string(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class HookHandler(ABC):
    """Base class for object listeners.

    Returning ``False`` from ``handle`` stops the propagation of the hook,
    any other value lets the next listener run.
    """

    @abstractmethod
    def handle(
        self,
        event: HookInterface,
        context: Optional[str] = None,
        additional_payload: Optional[Any] = None,
    ) -> Optional[bool]:
        """Handle a dispatched hook."""


@dataclass(frozen=True)
class Index:
    """Positional key into a HookCollection."""

    position: int


@dataclass(frozen=True)
class Name:
    """Name or type identity key into a HookCollection."""

    value: str


HookKey = Union[Index, Name]


def as_key(key: Any) -> Optional[HookKey]:
    """Turn a raw ``int``/``str`` key into a tagged key.

    Returns None for anything else (including ``bool``), which callers treat
    as a key that never matches.
    """
    if isinstance(key, (Index, Name)):
        return key
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return Index(key)
    if isinstance(key, str):
        return Name(key)
    return None
