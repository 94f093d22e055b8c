"""Errors raised by userdirs."""

from __future__ import annotations


class HomeDirError(RuntimeError):
    """The home directory could not be located."""

    def __init__(self, message: str = "could not locate home directory") -> None:
        super().__init__(message)
