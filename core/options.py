from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class RuleOptions:
    # When set, a side holding any jump may not make a simple move.
    mandatory_capture: bool = False

    @classmethod
    def from_env(cls, prefix: str = "CHECKERS_") -> "RuleOptions":
        raw = os.environ.get(f"{prefix}MANDATORY_CAPTURE", "")
        return cls(mandatory_capture=parse_flag(raw))


def parse_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Cannot interpret {raw!r} as a boolean flag.")
