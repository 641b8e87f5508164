"""Ordered container of hooks addressable by position or by name."""

from typing import Any, Callable, Iterable, Iterator, Optional, Union

from loguru import logger

from .config import config
from .exceptions import HookNotFoundError, InvalidHookError, UnsupportedOperationError
from .types import HookInterface, HookKey, Index, Name, as_key, type_identity

KeyLike = Union[int, str, HookKey]


def _matches(item: HookInterface, name: str) -> bool:
    return item.name == name or type_identity(item) == name


def _is_hook(item: Any) -> bool:
    # Hook classes expose the same attributes as their instances; a name()
    # method would never compare equal to a string
    return (
        not isinstance(item, type)
        and isinstance(item, HookInterface)
        and not callable(getattr(item, "name", None))
    )


def _validate(item: Any) -> HookInterface:
    if not _is_hook(item):
        raise InvalidHookError()
    return item


class HookCollection:
    """An ordered list of hooks.

    Items are reachable by zero-based position or by a string that is either
    the hook's name or its type identity (``module.ClassName``). String
    lookups scan linearly and return the first match. Only objects satisfying
    ``HookInterface`` are accepted.

    Bulk operations that would need numeric or associative coercion of the
    stored objects (averages, flattening, chunking, ...) are disabled and
    raise ``UnsupportedOperationError``; see ``UNSUPPORTED_OPERATIONS``.
    """

    UNSUPPORTED_OPERATIONS: tuple[str, ...] = (
        "times",
        "avg",
        "average",
        "median",
        "mode",
        "collapse",
        "flip",
        "group_by",
        "except_",
        "flatten",
        "key_by",
        "join",
        "map_to_dictionary",
        "map_with_keys",
        "merge_recursive",
        "nth",
        "replace_recursive",
        "splice",
        "split",
        "chunk",
        "take",
        "transform",
        "zip",
        "pad",
    )

    def __init__(self, items: Optional[Iterable[Any]] = None):
        items = list(items or [])
        for item in items:
            if not _is_hook(item):
                raise InvalidHookError(
                    'One or more of the given items are not valid "HookInterface" instances.'
                )
        self._items: list[HookInterface] = items

    # -- adding -------------------------------------------------------------

    def push(self, item: Any) -> "HookCollection":
        """Append a hook."""
        self._items.append(_validate(item))
        return self

    def add(self, item: Any) -> "HookCollection":
        """Alias for push()."""
        return self.push(item)

    def prepend(self, item: Any) -> "HookCollection":
        """Insert a hook at position 0."""
        self._items.insert(0, _validate(item))
        return self

    # -- lookup -------------------------------------------------------------

    def contains(self, key: Any, operator: Any = None, value: Any = None) -> bool:
        """Whether a hook matching ``key`` is stored.

        A hook as ``key`` matches by name only; a string matches the name or
        the type identity. Hooks cannot be ordered, so relational matching is
        not supported: ``operator`` and ``value`` are accepted for call
        compatibility with generic containers and are ignored.
        """
        if _is_hook(key):
            return any(item.name == key.name for item in self._items)
        return any(_matches(item, str(key)) for item in self._items)

    def find(self, name: str) -> Optional[HookInterface]:
        """Return the first hook matching ``name``, or None."""
        for item in self._items:
            if _matches(item, name):
                return item
        return None

    def find_or_fail(self, name: str) -> HookInterface:
        """Like find(), but raise HookNotFoundError when nothing matches."""
        item = self.find(name)
        if item is None:
            raise HookNotFoundError(name)
        return item

    def search(self, value: Any) -> Union[int, bool]:
        """Return the position of the first hook matching ``value``.

        Returns ``False`` when nothing matches; check with ``is False`` since
        position 0 is falsy too.
        """
        value = str(value)
        for position, item in enumerate(self._items):
            if _matches(item, value):
                return position
        return False

    def _position(self, key: Optional[HookKey]) -> Optional[int]:
        if isinstance(key, Index):
            return key.position if 0 <= key.position < len(self._items) else None
        if isinstance(key, Name):
            found = self.search(key.value)
            return None if found is False else found
        return None

    def exists(self, key: KeyLike) -> bool:
        """Whether ``key`` (position, name or type identity) resolves to a hook."""
        return self._position(as_key(key)) is not None

    def get(self, key: KeyLike, default: Any = None) -> Any:
        """Return the hook at ``key`` or ``default``.

        A callable default is only called when the key is absent.
        """
        position = self._position(as_key(key))
        if position is not None:
            return self._items[position]
        return default() if callable(default) else default

    def unset(self, key: KeyLike) -> None:
        """Remove the hook at a position, or every hook matching a name."""
        key = as_key(key)
        if isinstance(key, Index):
            position = self._position(key)
            if position is not None:
                del self._items[position]
        elif isinstance(key, Name):
            before = len(self._items)
            self._items = [item for item in self._items if not _matches(item, key.value)]
            logger.debug(f"Removed {before - len(self._items)} hook(s) matching '{key.value}'")

    def pull(self, key: KeyLike, default: Any = None) -> Any:
        """Remove and return the hook at ``key``, or return ``default``."""
        position = self._position(as_key(key))
        if position is None:
            return default
        return self._items.pop(position)

    # -- plain accessors ----------------------------------------------------

    def all(self) -> list[HookInterface]:
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def first(self) -> Optional[HookInterface]:
        return self._items[0] if self._items else None

    def last(self) -> Optional[HookInterface]:
        return self._items[-1] if self._items else None

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def filter(self, predicate: Callable[[HookInterface], bool]) -> "HookCollection":
        return HookCollection(item for item in self._items if predicate(item))

    def map(self, callback: Callable[[HookInterface], Any]) -> list[Any]:
        # Mapped values are not hooks anymore, so this is a plain list
        return [callback(item) for item in self._items]

    def each(self, callback: Callable[[HookInterface], Any]) -> "HookCollection":
        """Call ``callback`` for every hook until it returns ``False``."""
        for item in list(self._items):
            if callback(item) is False:
                break
        return self

    def implode(self, separator: Any = None) -> Optional[str]:
        """Join the string form of every hook.

        Returns None if ``separator`` is not a scalar.
        """
        if separator is None:
            separator = config.HOOKS_IMPLODE_SEPARATOR
        if not isinstance(separator, (str, int, float)) or isinstance(separator, bool):
            return None
        return str(separator).join(item.to_string() for item in self._items)

    # -- python protocols ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[HookInterface]:
        return iter(list(self._items))

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: KeyLike) -> Optional[HookInterface]:
        return self.get(key)

    def __setitem__(self, key: int, item: Any) -> None:
        position = self._position(as_key(key))
        if not isinstance(key, int) or position is None:
            raise IndexError(f"Hook position out of range: {key!r}")
        self._items[position] = _validate(item)

    def __delitem__(self, key: KeyLike) -> None:
        self.unset(key)

    def __repr__(self) -> str:
        return f"HookCollection({self.names()!r})"

    # -- disabled operations ------------------------------------------------

    def _unsupported(self, operation: str):
        raise UnsupportedOperationError(operation)

    @classmethod
    def times(cls, number, callback=None):
        raise UnsupportedOperationError("times")

    def avg(self, callback=None):
        self._unsupported("avg")

    def average(self, callback=None):
        self._unsupported("average")

    def median(self, key=None):
        self._unsupported("median")

    def mode(self, key=None):
        self._unsupported("mode")

    def collapse(self):
        self._unsupported("collapse")

    def flip(self):
        self._unsupported("flip")

    def group_by(self, group_by, preserve_keys=False):
        self._unsupported("group_by")

    def except_(self, keys):
        self._unsupported("except_")

    def flatten(self, depth=None):
        self._unsupported("flatten")

    def key_by(self, key_by):
        self._unsupported("key_by")

    def join(self, glue, final_glue=""):
        self._unsupported("join")

    def map_to_dictionary(self, callback):
        self._unsupported("map_to_dictionary")

    def map_with_keys(self, callback):
        self._unsupported("map_with_keys")

    def merge_recursive(self, items):
        self._unsupported("merge_recursive")

    def nth(self, step, offset=0):
        self._unsupported("nth")

    def replace_recursive(self, items):
        self._unsupported("replace_recursive")

    def splice(self, offset, length=None, replacement=None):
        self._unsupported("splice")

    def split(self, number_of_groups):
        self._unsupported("split")

    def chunk(self, size):
        self._unsupported("chunk")

    def take(self, limit):
        self._unsupported("take")

    def transform(self, callback):
        self._unsupported("transform")

    def zip(self, *items):
        self._unsupported("zip")

    def pad(self, size, value):
        self._unsupported("pad")
