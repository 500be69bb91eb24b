# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# env var names
LOG_LEVEL_ENV_VAR = "SUDOKUGEN_LOG_LEVEL"  # global log level
CONFIG_PATH_ENV_VAR = "SUDOKUGEN_CONFIG"  # yaml config used by `sudokugen serve`

# defaults

DEFAULT_SIZE = 9
DEFAULT_BLANK_COUNT = 20
DEFAULT_PLACEHOLDER = "?"
DEFAULT_LISTEN_ADDRESS = "0.0.0.0"
DEFAULT_PORT = 5000

# generation caps the solution count here to tell "unique" from "multiple"
UNIQUENESS_PROBE_LIMIT = 2


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class OutputFormat(CaseInsensitiveEnum):
    """Output Format."""

    JSON = "json"  # {"puzzle": [[...], ...]}
    TEXT = "text"  # space separated rows with box separators


class SearchSignal(Enum):
    """Returned by a solution callback to steer the backtracking search."""

    STOP = "stop"
    CONTINUE = "continue"
