from __future__ import annotations

from importlib import import_module

__all__ = ["ConsoleConfig", "ConsoleSession", "render_board"]

_EXPORTS = {
    "ConsoleConfig": ".schemas",
    "ConsoleSession": ".session",
    "render_board": ".render",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name], __name__)
        return getattr(module, name)
    raise AttributeError(name)
