"""HTTP adapter exposing one click-driven checkers session."""

from __future__ import annotations

from importlib import import_module

__all__ = ["app", "create_app", "GameSession"]

_LAZY = {"app": ".app", "create_app": ".app", "GameSession": ".session"}


def __getattr__(name: str):
    if name in _LAZY:
        module = import_module(_LAZY[name], __name__)
        return getattr(module, name)
    raise AttributeError(name)
