"""
userdirs.resolver

Resolve user directories: override variables first, platform conventions second.

Responsibilities:
- Hold the per-platform default table (suffixes joined to the home directory).
- Answer single-category queries (data, config, cache, state, runtime).
- Build the aggregate ResolvedDirectories record.

Home is only looked up when an answer is built from it, so categories
satisfied by an override (or by APPDATA/LOCALAPPDATA on Windows) never fail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Callable

from .errors import HomeDirError
from .log import get_logger
from .platform import Platform
from .xdg import Category, Environ, process_environ, xdg_override

logger = get_logger("resolver")

HomeLookup = Callable[[], "PurePath | str"]


# ---------------------------------------------------------------------------
# Platform defaults
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Default:
    """A platform default: home joined with *parts*, unless *variable* is set."""

    parts: tuple[str, ...]
    variable: str | None = None


PLATFORM_DEFAULTS: dict[Platform, dict[Category, Default | None]] = {
    Platform.MACOS: {
        Category.DATA: Default(("Library", "Application Support")),
        Category.CONFIG: Default(("Library", "Preferences")),
        Category.CACHE: Default(("Library", "Caches")),
        Category.STATE: None,
        Category.RUNTIME: None,
    },
    Platform.WINDOWS: {
        Category.DATA: Default(("AppData", "Roaming"), variable="APPDATA"),
        Category.CONFIG: Default(("AppData", "Roaming"), variable="APPDATA"),
        Category.CACHE: Default(("AppData", "Local"), variable="LOCALAPPDATA"),
        Category.STATE: None,
        Category.RUNTIME: None,
    },
    Platform.POSIX: {
        Category.DATA: Default((".local", "share")),
        Category.CONFIG: Default((".config",)),
        Category.CACHE: Default((".cache",)),
        Category.STATE: Default((".local", "state")),
        Category.RUNTIME: None,
    },
}


def os_home() -> Path:
    """Ask the OS for the home directory (HOME / passwd entry / user profile)."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirError() from exc


# ---------------------------------------------------------------------------
# Aggregate record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedDirectories:
    home: PurePath
    data: PurePath
    config: PurePath
    cache: PurePath
    state: PurePath | None = None
    runtime: PurePath | None = None

    def joinpath(self, *parts: str) -> "ResolvedDirectories":
        """Return a copy with every directory except home joined with *parts*.

        Handy for application-scoped directories, e.g. ``dirs.joinpath("myapp")``.
        """
        def join(p: PurePath | None) -> PurePath | None:
            return p.joinpath(*parts) if p is not None else None

        return ResolvedDirectories(
            home=self.home,
            data=self.data.joinpath(*parts),
            config=self.config.joinpath(*parts),
            cache=self.cache.joinpath(*parts),
            state=join(self.state),
            runtime=join(self.runtime),
        )

    def as_dict(self) -> dict[str, str | None]:
        return {
            "home": str(self.home),
            "data": str(self.data),
            "config": str(self.config),
            "cache": str(self.cache),
            "state": str(self.state) if self.state is not None else None,
            "runtime": str(self.runtime) if self.runtime is not None else None,
        }


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryResolver:
    """
    Resolve directories against an environment, a platform and a home lookup.

    Any of the three left as None means "the live process value at call time":
    os.environ, the detected platform, Path.home(). Nothing is cached between
    calls. With overrides=False the XDG variables are ignored and only the
    platform conventions apply.
    """

    environ: Environ | None = field(default=None, hash=False)
    platform: Platform | None = None
    home_lookup: HomeLookup | None = field(default=None, compare=False)
    overrides: bool = True

    def _environ(self) -> Environ:
        return self.environ if self.environ is not None else process_environ()

    def _platform(self) -> Platform:
        return self.platform if self.platform is not None else Platform.detect()

    def home(self) -> PurePath:
        lookup = self.home_lookup or os_home
        return self._platform().path_type()(lookup())

    def default(
        self,
        category: Category,
        *,
        home: HomeLookup | None = None,
        platform: Platform | None = None,
        environ: Environ | None = None,
    ) -> PurePath | None:
        """Platform default for *category*, ignoring its override variable."""
        platform = platform or self._platform()
        environ = environ if environ is not None else self._environ()
        home = home or self.home

        rule = PLATFORM_DEFAULTS[platform][category]
        if rule is None:
            logger.debug("%s: no %s convention", category.value, platform.value)
            return None

        path_type = platform.path_type()
        if rule.variable is not None:
            value = environ.get(rule.variable)
            if value is not None:
                logger.debug("%s: from %s", category.value, rule.variable)
                return path_type(value)

        logger.debug("%s: %s default", category.value, platform.value)
        return path_type(home()).joinpath(*rule.parts)

    def resolve(
        self,
        category: Category,
        *,
        home: HomeLookup | None = None,
        platform: Platform | None = None,
        environ: Environ | None = None,
    ) -> PurePath | None:
        """Override variable if present, else the platform default."""
        platform = platform or self._platform()
        environ = environ if environ is not None else self._environ()

        if self.overrides:
            value = xdg_override(environ, category)
            if value is not None:
                logger.debug("%s: from %s", category.value, category.variable)
                return platform.path_type()(value)

        return self.default(category, home=home, platform=platform, environ=environ)

    def override(self, category: Category) -> str | None:
        """Raw override value for *category*, exactly as set; None when unset or disabled."""
        if not self.overrides:
            return None
        return xdg_override(self._environ(), category)

    def _required(self, category: Category, **kwargs) -> PurePath:
        path = self.resolve(category, **kwargs)
        if path is None:
            raise LookupError(f"no {category.value} directory convention")
        return path

    def data(self) -> PurePath:
        return self._required(Category.DATA)

    def config(self) -> PurePath:
        return self._required(Category.CONFIG)

    def cache(self) -> PurePath:
        return self._required(Category.CACHE)

    def state(self) -> PurePath | None:
        return self.resolve(Category.STATE)

    def runtime(self) -> PurePath | None:
        return self.resolve(Category.RUNTIME)

    def all_directories(self) -> ResolvedDirectories:
        """Resolve everything in one pass; home is looked up once."""
        platform = self._platform()
        environ = self._environ()
        home = platform.path_type()((self.home_lookup or os_home)())

        kwargs = dict(home=lambda: home, platform=platform, environ=environ)

        return ResolvedDirectories(
            home=home,
            data=self._required(Category.DATA, **kwargs),
            config=self._required(Category.CONFIG, **kwargs),
            cache=self._required(Category.CACHE, **kwargs),
            state=self.resolve(Category.STATE, **kwargs),
            runtime=self.resolve(Category.RUNTIME, **kwargs),
        )


# ---------------------------------------------------------------------------
# Module-level queries over the live process state
# ---------------------------------------------------------------------------

def home() -> PurePath:
    return DirectoryResolver().home()


def data() -> PurePath:
    return DirectoryResolver().data()


def config() -> PurePath:
    return DirectoryResolver().config()


def cache() -> PurePath:
    return DirectoryResolver().cache()


def state() -> PurePath | None:
    return DirectoryResolver().state()


def runtime() -> PurePath | None:
    return DirectoryResolver().runtime()


def all_directories() -> ResolvedDirectories:
    return DirectoryResolver().all_directories()
