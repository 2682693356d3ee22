"""Public package surface for dirnav.

Exports the core navigation types plus ``main`` for programmatic CLI
invocation. Implementation lives in submodules under ``dirnav``.
"""

from __future__ import annotations

from .application import Application, FilesystemApplication, NavigationTarget
from .entries import Entry
from .session import NavigationSession
from .settings import Settings


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Application",
    "Entry",
    "FilesystemApplication",
    "NavigationSession",
    "NavigationTarget",
    "Settings",
    "main",
]
