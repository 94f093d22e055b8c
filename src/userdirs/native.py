"""Platform conventions only: the directories you get with no XDG overrides set."""

from __future__ import annotations

from pathlib import PurePath

from .resolver import DirectoryResolver, ResolvedDirectories


def _native() -> DirectoryResolver:
    return DirectoryResolver(overrides=False)


def data() -> PurePath:
    return _native().data()


def config() -> PurePath:
    return _native().config()


def cache() -> PurePath:
    return _native().cache()


def state() -> PurePath | None:
    return _native().state()


def runtime() -> PurePath | None:
    # No platform has a runtime directory convention.
    return _native().runtime()


def all_directories() -> ResolvedDirectories:
    return _native().all_directories()
