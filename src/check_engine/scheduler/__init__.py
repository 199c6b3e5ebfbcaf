"""Pass scheduling."""

from .loop import CheckScheduler, PassOutcome

__all__ = ["CheckScheduler", "PassOutcome"]
