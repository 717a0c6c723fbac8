# File: src/mstair/envelope/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS
- Per-logger overrides in variables like LOG_LEVEL_<NAME>

Example::

    LOG_LEVELS="mstair.envelope.*:TRACE;WARNING"
    LOG_LEVEL_MSTAIR_ENVELOPE_PARSER=DEBUG

See LogLevelConfig for resolution rules.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import cache
from typing import ClassVar, Final, NamedTuple

import dotenv

from mstair.envelope.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogEnvVar", "LogLevelConfig"]

_LOG_VAR_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_LOG_VAR_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


@cache
def load_dotenv() -> bool:
    """Load a .env file found from the working directory once, never overriding the environment."""
    return dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True), override=False)


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed representation of a log-level environment variable.

    The suffix after LOG_LEVEL_ names a module: "__" -> "_" and "_" -> ".".
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^(?P<BASENAME>LOG_LEVELS?)          # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional suffix
        """,
        re.VERBOSE,
    )

    name: str = field(default="", repr=False)
    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if the given (name, value) is valid, else None."""
        re_match: re.Match[str] | None = cls.NAME_RX.match(name)
        if re_match is None:
            return None
        suffix: str = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a pattern string to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels using environment variables.

    Precedence: exact > ancestor > glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from current environment."""
        self.pattern_to_level.clear()
        for var in LogEnvVar.from_environ():
            for dsl in self.parse_log_var(var):
                self.pattern_to_level[dsl.pattern] = dsl.level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        lc_map: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        if name_lc in lc_map:
            return lc_map[name_lc]

        for anc in _ancestors(name_lc):
            if anc in lc_map:
                return lc_map[anc]

        best_level: int | None = None
        best_score: int = -1
        for pat, level in lc_map.items():
            if not _is_glob_pattern(pat) or not fnmatch.fnmatch(name_lc, pat):
                continue
            score = _glob_specificity(pat)
            if score > best_score:
                best_score, best_level = score, level
        if best_level is not None:
            return best_level

        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            initialize_logger_constants()
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @classmethod
    def reload(cls) -> LogLevelConfig:
        """Discard the singleton and rebuild it from the current environment."""
        global _log_level_config_instance
        _log_level_config_instance = None
        return cls.get_instance()

    @staticmethod
    def level_names_mapping() -> dict[str, int]:
        """Uppercase level-name mapping, including TRACE."""
        initialize_logger_constants()
        return {
            k.upper(): v
            for k, v in logging.getLevelNamesMapping().items()
            if isinstance(k, str) and k.isupper()
        }

    def parse_log_var(self, var: LogEnvVar) -> Iterator[LogEnvPatternLevel]:
        """Parse one LogEnvVar into pattern->level mappings, skipping unknown levels."""
        level_map = self.level_names_mapping()
        for fragment in _LOG_VAR_FRAGMENT_SEPARATOR_RX.split(var.value):
            pattern_level = fragment.strip()
            if not pattern_level:
                continue

            parts = _LOG_VAR_ASSIGNMENT_OPERATOR_RX.split(pattern_level, maxsplit=1)
            if len(parts) == 2:
                pattern = parts[0].strip().strip("'\"")
                level_name = parts[1].strip().strip("'\"").upper()
            else:
                pattern = ""  # bare level -> default/root
                level_name = parts[0].strip().strip("'\"").upper()

            if var.module:
                pattern = f"{var.module}.{pattern}" if pattern not in {"", "root"} else var.module
            if pattern.lower() == "root":
                pattern = ""

            level_num: int = level_map.get(level_name, logging.NOTSET)
            if level_num == logging.NOTSET:
                continue

            yield LogEnvPatternLevel(pattern, level_num)


def _is_glob_pattern(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def _ancestors(logger_name: str) -> list[str]:
    """Return ancestor names of a dotted logger path, most specific first."""
    parts = logger_name.split(".")
    result: list[str] = []
    while len(parts) > 1:
        parts = parts[:-1]
        result.append(".".join(parts))
    return result


def _glob_specificity(pattern: str) -> int:
    """Length of fixed prefix before any wildcard."""
    return min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))


# End of file: src/mstair/envelope/xlogging/logger_util.py
