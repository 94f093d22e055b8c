from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath


class Platform(str, Enum):
    """Platform families with distinct directory conventions."""

    MACOS = "macos"
    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def detect(cls, identifier: str | None = None) -> "Platform":
        ident = sys.platform if identifier is None else identifier
        if ident == "darwin":
            return cls.MACOS
        if ident == "win32":
            return cls.WINDOWS
        return cls.POSIX

    @classmethod
    def from_name(cls, name: str) -> "Platform":
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown platform '{name}' (known: {known})") from None

    def path_type(self) -> type[PurePath]:
        # Concrete Path when the flavor matches the host, so callers get usable paths.
        pure = PureWindowsPath if self is Platform.WINDOWS else PurePosixPath
        return Path if isinstance(Path(), pure) else pure
