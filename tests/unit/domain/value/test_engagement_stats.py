"""Unit tests for EngagementStats scoring."""

import pytest

from folio.domain.value import EngagementStats


class TestPopularityScore:
    """Tests for the weighted popularity score."""

    def test_weights_views_likes_and_comments(self):
        """Score should be views*1 + likes*10 + comments*15."""
        stats = EngagementStats(views=7, likes=3, comments=2)

        assert stats.popularity_score == 7 + 30 + 30

    def test_empty_stats_score_zero(self):
        stats = EngagementStats()

        assert stats.popularity_score == 0
        assert stats.engagement == 0

    def test_engagement_is_plain_sum(self):
        stats = EngagementStats(views=4, likes=2, comments=1)

        assert stats.engagement == 7

    def test_addition_sums_counters(self):
        """Adding stats should sum each counter, and therefore each score."""
        a = EngagementStats(views=1, likes=2, comments=3)
        b = EngagementStats(views=10, likes=0, comments=1)

        total = a + b

        assert (total.views, total.likes, total.comments) == (11, 2, 4)
        assert total.popularity_score == a.popularity_score + b.popularity_score

    def test_negative_counters_rejected(self):
        with pytest.raises(ValueError):
            EngagementStats(views=-1)

    def test_serializes_derived_fields(self):
        """Computed fields should be part of the dumped model."""
        dumped = EngagementStats(views=1, likes=1, comments=1).model_dump()

        assert dumped["engagement"] == 3
        assert dumped["popularity_score"] == 26
