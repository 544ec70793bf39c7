"""
Helmsman runtime configuration.

Scope
- Settings: frozen carrier for the few knobs a session reads.
  • verbose: show diagnostic type hints (e.g. "<text,text>") next to help text.
  • colorful: style faults when rendering them with rich.
  • fancy: render faults inside a Panel instead of plain lines.

Precedence (highest first)
- explicit keyword overrides passed to Settings.load(...)
- environment variables HELMSMAN_VERBOSE, HELMSMAN_COLORFUL, HELMSMAN_FANCY
- a `__helmsman__` mapping declared by the host program in `__main__`
- class defaults
"""
import os
from dataclasses import dataclass, fields, replace

from .utils import Unset, truthy

ENVIRON_PREFIX = "HELMSMAN_"


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    colorful: bool = True
    fancy: bool = False

    @classmethod
    def load(cls, /, **overrides):
        """
        Build Settings from defaults, host mapping, environment and overrides.

        Unset overrides are ignored so callers can forward optional keywords
        untouched.

        Raises
        - TypeError: when an override names an unknown setting.
        """
        names = {field.name for field in fields(cls)}
        if unknown := set(overrides) - names:
            raise TypeError(f"Settings.load() got unexpected keyword(s): {', '.join(sorted(unknown))}")

        settings = cls()

        host = getattr(__import__("__main__"), "__helmsman__", {})
        if isinstance(host, dict):
            settings = replace(settings, **{
                name: truthy(value) for name, value in host.items() if name in names
            })

        for name in names:
            if (value := os.environ.get(ENVIRON_PREFIX + name.upper())) is not None:
                settings = replace(settings, **{name: truthy(value)})

        return replace(settings, **{
            name: bool(value) for name, value in overrides.items() if value is not Unset
        })


__all__ = (
    "Settings",
)
