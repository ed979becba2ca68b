"""
Per-target severity rules

Rules have the form ``target=level`` and are usually supplied as one
comma-separated string::

    filters = TargetFilter.from_str("urllib3.connectionpool=debug,asyncio=info")
    filters.is_target_suppressed("asyncio.tasks", SeverityLevel.DEBUG)  # True

A rule matches a target equal to its key or nested below it, where nesting
is marked by ``"."`` (logger names) or ``"::"``. A matching rule hides every
record whose level is at least as verbose as the rule's threshold.
"""

import logging
import os
from typing import Dict, Iterable, Iterator, Optional, Tuple

from ..levels import SeverityLevel
from .base import FilterResult, LogFilter

DEFAULT_ENV_KEY = "LOG_FILTER"
MODULE_SEPARATORS = ("::", ".")


def parse_rule(rule: str) -> Optional[Tuple[str, SeverityLevel]]:
    """Split ``target=level`` on the first ``=``; None when malformed

    Only whitespace around the whole rule is dropped; the target is kept
    as written.
    """
    key, sep, value = rule.strip().partition("=")
    if not sep or not key:
        return None
    return key, SeverityLevel.parse(value)


class TargetFilter(LogFilter):
    """Table of ``target prefix -> threshold`` rules"""

    def __init__(self, rules: Iterable[str] = ()):
        targets: Dict[str, SeverityLevel] = {}
        for rule in rules:
            parsed = parse_rule(str(rule))
            if parsed is not None:
                targets[parsed[0]] = parsed[1]
        self._targets = targets

    @classmethod
    def from_str(cls, rules: str) -> "TargetFilter":
        """Create a table from ``target1=level,target2=level``"""
        return cls(rules.split(","))

    @classmethod
    def from_env(cls) -> "TargetFilter":
        """Create a table from the ``LOG_FILTER`` environment variable"""
        return cls.from_env_key(DEFAULT_ENV_KEY)

    @classmethod
    def from_env_key(cls, key: str) -> "TargetFilter":
        """Create a table from the named environment variable, empty if unset"""
        value = os.getenv(key)
        if value is None:
            return cls()
        return cls.from_str(value)

    def rules(self) -> Iterator[Tuple[str, SeverityLevel]]:
        """Iterate over the ``(target, threshold)`` pairs"""
        return iter(self._targets.items())

    def get(self, target: str) -> Optional[SeverityLevel]:
        return self._targets.get(target)

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, target: object) -> bool:
        return target in self._targets

    def __repr__(self) -> str:
        rules = ",".join(f"{k}={v.name.lower()}" for k, v in self._targets.items())
        return f"TargetFilter({rules!r})"

    @staticmethod
    def matches(prefix: str, target: str) -> bool:
        """True if ``target`` is ``prefix`` itself or a module nested under it"""
        if not target.startswith(prefix):
            return False
        rest = target[len(prefix):]
        return not rest or rest.startswith(MODULE_SEPARATORS)

    def is_target_suppressed(self, target: str, level: SeverityLevel) -> bool:
        """True if a rule covering ``target`` hides records at ``level``"""
        return any(
            level >= threshold
            for prefix, threshold in self._targets.items()
            if self.matches(prefix, target)
        )

    def should_log(self, record: logging.LogRecord) -> FilterResult:
        level = SeverityLevel.from_levelno(record.levelno)
        suppressed = self.is_target_suppressed(record.name, level)
        return FilterResult(
            should_log=not suppressed,
            reason=f"target_filter: {record.name} {'suppressed' if suppressed else 'allowed'} at {level.name}",
        )
