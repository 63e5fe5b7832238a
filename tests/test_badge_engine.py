"""Unit tests for BadgeEngine - pure Python logic tests.

These tests verify threshold evaluation and template reconciliation without
any Home Assistant mocking. The BadgeEngine never mutates its inputs.

Test Categories:
- Default badge set
- Threshold evaluation (boundary, monotonic award, idempotence, multi-badge)
- Template merge (merge_with_templates)
- Progress and next badge
"""

from __future__ import annotations

import copy

import pytest

from custom_components.studytracker import const
from custom_components.studytracker.engines.badge_engine import BadgeEngine
from tests.helpers import make_badge

AWARD_TIME = "2026-03-01T18:00:00+00:00"
LATER_TIME = "2026-03-09T18:00:00+00:00"


def earned_ids(badges) -> list[str]:
    """Return ids of earned badges in order."""
    return [b[const.DATA_BADGE_ID] for b in badges if BadgeEngine.is_earned(b)]


# =============================================================================
# DEFAULT BADGES
# =============================================================================


class TestDefaultBadges:
    """Tests for BadgeEngine.default_badges."""

    def test_matches_templates_unearned(self) -> None:
        """Five badges in ascending threshold order, none earned."""
        badges = BadgeEngine.default_badges()

        assert [b[const.DATA_BADGE_HOURS_REQUIRED] for b in badges] == [
            15,
            30,
            50,
            100,
            200,
        ]
        assert earned_ids(badges) == []

    def test_returns_fresh_copies(self) -> None:
        """Modifying a returned badge never touches the templates."""
        badges = BadgeEngine.default_badges()
        badges[0][const.DATA_BADGE_DATE_EARNED] = AWARD_TIME

        assert const.BADGE_TEMPLATES[0][const.DATA_BADGE_DATE_EARNED] == ""
        assert BadgeEngine.default_badges()[0][const.DATA_BADGE_DATE_EARNED] == ""


# =============================================================================
# EVALUATION
# =============================================================================


class TestEvaluate:
    """Tests for BadgeEngine.evaluate."""

    def test_nothing_earned_at_zero(self) -> None:
        """An empty log earns nothing."""
        updated, newly_earned = BadgeEngine.evaluate(
            0.0, BadgeEngine.default_badges(), AWARD_TIME
        )

        assert newly_earned == []
        assert earned_ids(updated) == []

    @pytest.mark.parametrize(
        ("threshold_index", "hours_required"),
        [(0, 15), (1, 30), (2, 50), (3, 100), (4, 200)],
    )
    def test_threshold_boundary(self, threshold_index: int, hours_required: int) -> None:
        """A badge is not earned at threshold - 0.01 and is earned at threshold."""
        badges = BadgeEngine.default_badges()
        badge_id = badges[threshold_index][const.DATA_BADGE_ID]

        below, _ = BadgeEngine.evaluate(hours_required - 0.01, badges, AWARD_TIME)
        at, _ = BadgeEngine.evaluate(float(hours_required), badges, AWARD_TIME)

        assert badge_id not in earned_ids(below)
        assert badge_id in earned_ids(at)

    def test_sets_award_timestamp(self) -> None:
        """A newly earned badge carries the pass timestamp."""
        updated, newly_earned = BadgeEngine.evaluate(
            15.0, BadgeEngine.default_badges(), AWARD_TIME
        )

        assert [b[const.DATA_BADGE_ID] for b in newly_earned] == ["badge1"]
        assert updated[0][const.DATA_BADGE_DATE_EARNED] == AWARD_TIME

    def test_multiple_badges_in_one_pass(self) -> None:
        """Crossing several thresholds at once earns all of them together."""
        updated, newly_earned = BadgeEngine.evaluate(
            55.0, BadgeEngine.default_badges(), AWARD_TIME
        )

        assert [b[const.DATA_BADGE_ID] for b in newly_earned] == [
            "badge1",
            "badge2",
            "badge3",
        ]
        assert {b[const.DATA_BADGE_DATE_EARNED] for b in newly_earned} == {AWARD_TIME}
        assert earned_ids(updated) == ["badge1", "badge2", "badge3"]

    def test_earned_badges_never_revoked(self) -> None:
        """A lower total keeps earned badges and their original date."""
        earned, _ = BadgeEngine.evaluate(35.0, BadgeEngine.default_badges(), AWARD_TIME)

        updated, newly_earned = BadgeEngine.evaluate(20.0, earned, LATER_TIME)

        assert newly_earned == []
        assert earned_ids(updated) == ["badge1", "badge2"]
        assert updated[0][const.DATA_BADGE_DATE_EARNED] == AWARD_TIME

    def test_idempotent(self) -> None:
        """Re-evaluating with the same total changes nothing."""
        first, _ = BadgeEngine.evaluate(35.0, BadgeEngine.default_badges(), AWARD_TIME)

        second, newly_earned = BadgeEngine.evaluate(35.0, first, LATER_TIME)

        assert newly_earned == []
        assert second == first

    def test_does_not_mutate_input(self) -> None:
        """The input collection is left untouched."""
        badges = BadgeEngine.default_badges()
        snapshot = copy.deepcopy(badges)

        BadgeEngine.evaluate(200.0, badges, AWARD_TIME)

        assert badges == snapshot

    def test_default_timestamp_is_iso(self) -> None:
        """Without an override the award time is a UTC ISO timestamp."""
        _, newly_earned = BadgeEngine.evaluate(15.0, [make_badge()])

        assert newly_earned[0][const.DATA_BADGE_DATE_EARNED].endswith("+00:00")


# =============================================================================
# TEMPLATE MERGE
# =============================================================================


class TestMergeWithTemplates:
    """Tests for BadgeEngine.merge_with_templates."""

    def test_empty_storage_yields_defaults(self) -> None:
        """No stored badges means the default set."""
        assert BadgeEngine.merge_with_templates([]) == BadgeEngine.default_badges()

    def test_keeps_earned_dates(self) -> None:
        """Stored award dates survive the merge."""
        stored = [make_badge("badge2", 30, date_earned=AWARD_TIME, name="Focus Master")]

        merged = BadgeEngine.merge_with_templates(stored)

        assert earned_ids(merged) == ["badge2"]
        assert merged[1][const.DATA_BADGE_DATE_EARNED] == AWARD_TIME

    def test_duplicate_ids_keep_earned_date(self) -> None:
        """A later unearned copy of an id never clears an earlier award."""
        stored = [
            make_badge("badge1", 15, date_earned=AWARD_TIME),
            make_badge("badge1", 15),
            make_badge("badge2", 30),
            make_badge("badge2", 30, date_earned=AWARD_TIME),
        ]

        merged = BadgeEngine.merge_with_templates(stored)

        assert earned_ids(merged) == ["badge1", "badge2"]
        assert merged[0][const.DATA_BADGE_DATE_EARNED] == AWARD_TIME

    def test_template_definition_wins(self) -> None:
        """Stored names and thresholds are replaced by the template values."""
        stored = [make_badge("badge1", 1, name="Renamed", emoji="x")]

        merged = BadgeEngine.merge_with_templates(stored)

        assert merged[0][const.DATA_BADGE_NAME] == "Study Star"
        assert merged[0][const.DATA_BADGE_HOURS_REQUIRED] == 15
        assert merged[0][const.DATA_BADGE_EMOJI] == "🌟"

    def test_drops_unknown_ids_and_restores_order(self) -> None:
        """Ids outside the templates are dropped and order follows the templates."""
        stored = [
            make_badge("badge5", 200, name="Knowledge King"),
            make_badge("legacy", 5, date_earned=AWARD_TIME),
            make_badge("badge1", 15),
        ]

        merged = BadgeEngine.merge_with_templates(stored)

        assert [b[const.DATA_BADGE_ID] for b in merged] == [
            "badge1",
            "badge2",
            "badge3",
            "badge4",
            "badge5",
        ]
        assert earned_ids(merged) == []


# =============================================================================
# PROGRESS
# =============================================================================


class TestProgress:
    """Tests for BadgeEngine.badge_progress and next_badge."""

    def test_partial_progress(self) -> None:
        """Progress is the share of the threshold reached."""
        assert BadgeEngine.badge_progress(7.5, make_badge()) == pytest.approx(50.0)

    def test_progress_capped(self) -> None:
        """Progress never exceeds 100."""
        assert BadgeEngine.badge_progress(40.0, make_badge()) == 100.0

    def test_earned_badge_is_complete(self) -> None:
        """An earned badge reports 100 even after the total drops."""
        badge = make_badge(date_earned=AWARD_TIME)

        assert BadgeEngine.badge_progress(0.0, badge) == 100.0

    def test_zero_threshold_is_complete(self) -> None:
        """A zero threshold never divides by zero."""
        assert BadgeEngine.badge_progress(0.0, make_badge(hours_required=0)) == 100.0

    def test_next_badge(self) -> None:
        """The next badge is the first unearned one in catalog order."""
        badges, _ = BadgeEngine.evaluate(
            20.0, BadgeEngine.default_badges(), AWARD_TIME
        )

        next_badge = BadgeEngine.next_badge(badges)

        assert next_badge is not None
        assert next_badge[const.DATA_BADGE_ID] == "badge2"

    def test_no_next_badge_when_all_earned(self) -> None:
        """None once every badge is earned."""
        badges, _ = BadgeEngine.evaluate(
            250.0, BadgeEngine.default_badges(), AWARD_TIME
        )

        assert BadgeEngine.next_badge(badges) is None
