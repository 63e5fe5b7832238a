"""Test helpers for Study Tracker integration tests.

This module re-exports all helpers for convenient imports:

    from tests.helpers import (
        # Builders
        make_entry, make_log, make_badge, storage_record,

        # Setup
        setup_integration, setup_from_yaml, SetupResult,
    )

See individual modules for full documentation:
- builders.py: Plain record builders in the persisted layout
- setup.py: Storage seeding and config flow setup
"""

from tests.helpers.builders import make_badge, make_entry, make_log, storage_record
from tests.helpers.setup import (
    SetupResult,
    seed_storage,
    setup_from_yaml,
    setup_integration,
)

__all__ = [
    "SetupResult",
    "make_badge",
    "make_entry",
    "make_log",
    "seed_storage",
    "setup_from_yaml",
    "setup_integration",
    "storage_record",
]
