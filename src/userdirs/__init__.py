"""
userdirs

User directories that respect explicitly set XDG variables on every platform,
falling back to the platform conventions (macOS, Windows, everything else)
only when a variable is unset.
"""

from __future__ import annotations

from .errors import HomeDirError
from .platform import Platform
from .resolver import (
    DirectoryResolver,
    ResolvedDirectories,
    all_directories,
    cache,
    config,
    data,
    home,
    runtime,
    state,
)
from .xdg import Category

__all__ = [
    "Category",
    "DirectoryResolver",
    "HomeDirError",
    "Platform",
    "ResolvedDirectories",
    "all_directories",
    "cache",
    "config",
    "data",
    "home",
    "runtime",
    "state",
]
