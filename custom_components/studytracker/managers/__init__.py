"""Stateful managers for Study Tracker.

Managers wrap the pure engines with persistence side effects.
"""

from .badge_manager import BadgeManager
from .log_manager import LogManager

__all__ = ["BadgeManager", "LogManager"]
