"""Engine modules for Study Tracker integration.

Contains pure computation engines:
- aggregation_engine: Total and per-subject hour derivation
- badge_engine: Threshold evaluation and badge reconciliation
- session_engine: Session draft arithmetic and log entry creation
"""

from .aggregation_engine import AggregationEngine
from .badge_engine import BadgeEngine
from .session_engine import SessionEngine

__all__ = [
    "AggregationEngine",
    "BadgeEngine",
    "SessionEngine",
]
