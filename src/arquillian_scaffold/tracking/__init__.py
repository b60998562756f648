"""State tracking between command invocations."""

from .state_tracker import ScaffoldStateTracker

__all__ = ['ScaffoldStateTracker']
