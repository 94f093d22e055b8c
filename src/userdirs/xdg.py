from __future__ import annotations

import os
from enum import Enum
from typing import Mapping

"""
XDG override variables for userdirs.

Every category has one override variable. When the variable is present in the
environment (any value, even empty) it wins over the platform convention:
- data    -> XDG_DATA_HOME
- config  -> XDG_CONFIG_HOME
- cache   -> XDG_CACHE_HOME
- state   -> XDG_STATE_HOME
- runtime -> XDG_RUNTIME_DIR

The environment is anything with a Mapping-style get(); os.environ by default.
"""

Environ = Mapping[str, str]


class Category(str, Enum):
    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    STATE = "state"
    RUNTIME = "runtime"

    @property
    def variable(self) -> str:
        return OVERRIDE_VARIABLES[self]


OVERRIDE_VARIABLES: dict[Category, str] = {
    Category.DATA: "XDG_DATA_HOME",
    Category.CONFIG: "XDG_CONFIG_HOME",
    Category.CACHE: "XDG_CACHE_HOME",
    Category.STATE: "XDG_STATE_HOME",
    Category.RUNTIME: "XDG_RUNTIME_DIR",
}


def process_environ() -> Environ:
    return os.environ


def xdg_override(environ: Environ, category: Category) -> str | None:
    """Return the raw override value for *category*, or None when unset."""
    return environ.get(category.variable)
