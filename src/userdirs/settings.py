from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
import sys

from .platform import Platform


@dataclass(frozen=True)
class Settings:
    platform: Platform | None = None
    home: str | None = None
    environment: dict[str, str] | None = field(default=None, hash=False)   # None -> use os.environ
    source: Path | None = field(default=None, compare=False)


def load_settings(path: Path) -> Settings:
    """
    Load a userdirs YAML config.

    Every key is optional:

        platform: posix          # macos | windows | posix
        home: /home/leah
        environment:
          XDG_CONFIG_HOME: /tmp/cfg

    Problems with individual entries are reported on stderr and skipped.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        print(f"Config warning: {path} is not a mapping; ignoring it", file=sys.stderr)
        return Settings(source=path)

    platform = None
    raw_platform = data.get("platform")
    if raw_platform is not None:
        try:
            platform = Platform.from_name(str(raw_platform))
        except ValueError as exc:
            print(f"Config warning: {exc}", file=sys.stderr)

    raw_home = data.get("home")
    home = str(raw_home) if raw_home is not None else None

    environment = None
    raw_env = data.get("environment")
    if raw_env is not None:
        if not isinstance(raw_env, dict):
            print("Config warning: 'environment' must be a mapping; ignoring it", file=sys.stderr)
        else:
            environment = {}
            for k, v in raw_env.items():
                if v is None:
                    print(f"Config warning: variable '{k}' has no value; skipping", file=sys.stderr)
                    continue
                environment[str(k)] = str(v)

    return Settings(platform=platform, home=home, environment=environment, source=path)
