"""Core application package."""

from .application import ArquillianScaffoldApp

__all__ = [
    'ArquillianScaffoldApp',
]
