"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from userdirs import DirectoryResolver, HomeDirError, Platform
from userdirs.xdg import OVERRIDE_VARIABLES

LEAH = "/home/leah"
LEAH_WINDOWS = r"C:\Users\Leah"


def missing_home():
    raise HomeDirError()


def make_resolver(
    *,
    environ: dict[str, str] | None = None,
    platform: Platform = Platform.POSIX,
    home: str | None = LEAH,
    overrides: bool = True,
) -> DirectoryResolver:
    """Build a resolver over a fixed environment; home=None means lookup fails."""
    return DirectoryResolver(
        environ=environ if environ is not None else {},
        platform=platform,
        home_lookup=(lambda: home) if home is not None else missing_home,
        overrides=overrides,
    )


@pytest.fixture()
def clean_environ(monkeypatch):
    """Remove every variable userdirs reads from the real process environment."""
    for name in [*OVERRIDE_VARIABLES.values(), "APPDATA", "LOCALAPPDATA"]:
        monkeypatch.delenv(name, raising=False)
