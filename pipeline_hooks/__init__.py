"""In-process named hook dispatching."""

from loguru import logger

from .collection import HookCollection
from .dispatcher import HookDispatcher, get_dispatcher, hook, set_dispatcher
from .exceptions import (
    HookError,
    HookNotFoundError,
    InvalidHookError,
    InvalidHookHandlerError,
    UnsupportedOperationError,
)
from .listeners import DeferredListener, DirectListener, HandlerListener, make_listener
from .log import configure_logging, disable_logging
from .resolver import ImportResolver, import_string
from .types import Hook, HookHandler, HookInterface, Index, Name, type_identity

# Silent unless the application calls configure_logging()
logger.disable("pipeline_hooks")

__all__ = [
    "Hook",
    "HookHandler",
    "HookInterface",
    "HookCollection",
    "HookDispatcher",
    "Index",
    "Name",
    "type_identity",
    "DirectListener",
    "HandlerListener",
    "DeferredListener",
    "make_listener",
    "ImportResolver",
    "import_string",
    "get_dispatcher",
    "set_dispatcher",
    "hook",
    "configure_logging",
    "disable_logging",
    "HookError",
    "HookNotFoundError",
    "InvalidHookError",
    "InvalidHookHandlerError",
    "UnsupportedOperationError",
]
