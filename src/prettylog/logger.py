"""
Process-wide installation of the prettylog handler

The first successful ``init`` attaches a PrettyHandler to the root logger and
opens the root level fully, leaving all filtering to the handler. Later
calls do not replace it.
"""

import logging
import threading
from typing import Optional, Union

from .exceptions import AlreadyInitializedError
from .filtering import TargetFilter
from .formatter import PrettyFormatter
from .handler import PrettyHandler
from .levels import TRACE_LEVEL, SeverityLevel

# Lifecycle messages stay off the console this module installs; attach a
# handler to "prettylog.install" to see them.
logger = logging.getLogger("prettylog.install")
logger.addHandler(logging.NullHandler())
logger.propagate = False

_handler: Optional[PrettyHandler] = None
_init_lock = threading.Lock()

LevelLike = Union[str, int, SeverityLevel]


def _install(
    formatter: PrettyFormatter, min_level: LevelLike, filters: Optional[TargetFilter]
) -> PrettyHandler:
    global _handler
    with _init_lock:
        installed = _handler is None
        if installed:
            handler = PrettyHandler(formatter, min_level, filters)
            root = logging.getLogger()
            root.addHandler(handler)
            root.setLevel(TRACE_LEVEL)
            _handler = handler

    if not installed:
        logger.debug("prettylog handler already installed; ignoring init")
        raise AlreadyInitializedError()

    logger.debug(
        "prettylog handler installed (min_level=%s, rules=%d)",
        handler.min_level.name,
        len(filters) if filters is not None else 0,
    )
    return handler


def init(formatter: PrettyFormatter, min_level: LevelLike) -> PrettyHandler:
    """Install a handler with a minimum level and no target rules

    Raises AlreadyInitializedError if a handler is already installed.
    """
    return _install(formatter, min_level, None)


def init_with_filters(
    formatter: PrettyFormatter, min_level: LevelLike, filters: TargetFilter
) -> PrettyHandler:
    """Install a handler with a minimum level and target rules"""
    return _install(formatter, min_level, filters)


def try_init(formatter: PrettyFormatter, min_level: LevelLike) -> bool:
    """Like init, returning whether this call installed the handler"""
    try:
        init(formatter, min_level)
    except AlreadyInitializedError:
        return False
    return True


def try_init_with_filters(
    formatter: PrettyFormatter, min_level: LevelLike, filters: TargetFilter
) -> bool:
    """Like init_with_filters, returning whether this call installed the handler"""
    try:
        init_with_filters(formatter, min_level, filters)
    except AlreadyInitializedError:
        return False
    return True


def get_handler() -> Optional[PrettyHandler]:
    """The installed handler, or None before initialization"""
    return _handler


def is_initialized() -> bool:
    return _handler is not None


def _reset_for_tests() -> None:
    global _handler
    with _init_lock:
        if _handler is not None:
            logging.getLogger().removeHandler(_handler)
        _handler = None
