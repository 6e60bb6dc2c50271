"""
Tests for interviewace.core.analytics

Covers:
- Score scale handling and migration of unlabelled records
- Trend detection
- Snapshot ordering, averaging and skill breakdown
"""

from datetime import datetime, timedelta, timezone

import pytest

from interviewace.core.analytics import build_analytics_snapshot, detect_trend, to_subscore
from interviewace.models.analytics import SessionRecord, StoredAnswerEvaluation
from interviewace.models.profile import AnalyticsSnapshot, ScoreTrend


class TestToSubscore:
    @pytest.mark.parametrize(
        "value,scale,expected",
        [
            (7, "0-10", 7),
            (85, "0-100", 9),
            (85, None, 9),
            (7, None, 7),
            (10, None, 10),
        ],
    )
    def test_scales(self, value, scale, expected):
        assert to_subscore(value, scale) == expected

    def test_ten_point_scale_is_clamped(self):
        assert to_subscore(40, "0-10") == 10


class TestTrend:
    @pytest.mark.parametrize(
        "recent,expected",
        [
            ([60, 70], ScoreTrend.IMPROVING),
            ([70, 60], ScoreTrend.DECLINING),
            ([60, 80, 64], ScoreTrend.STABLE),
            ([60, 65], ScoreTrend.STABLE),
            ([50], ScoreTrend.STABLE),
            ([], ScoreTrend.STABLE),
        ],
    )
    def test_detect_trend(self, recent, expected):
        assert detect_trend(recent) == expected


class TestSnapshot:
    def test_empty(self):
        assert build_analytics_snapshot([]) == AnalyticsSnapshot()

    def test_orders_and_aggregates(self):
        records = [
            SessionRecord(
                session_id="b",
                started_at=datetime(2024, 1, 2, 9, 0),
                overall_score=70,
                evaluations=[
                    StoredAnswerEvaluation(technical=80, clarity=60, confidence=70, score=90, scale="0-100"),
                ],
            ),
            SessionRecord(session_id="untimed", overall_score=60),
            SessionRecord(
                session_id="a",
                started_at=datetime(2024, 1, 1, 9, 0),
                overall_score=50,
                evaluations=[
                    StoredAnswerEvaluation(technical=6, clarity=7, confidence=5, score=8, scale="0-10"),
                ],
            ),
        ]
        snapshot = build_analytics_snapshot(records)

        assert snapshot.total_sessions == 3
        assert snapshot.average_score == 60
        assert snapshot.recent_performance == [50, 70, 60]
        assert snapshot.score_trend == ScoreTrend.IMPROVING
        assert snapshot.skill_breakdown.technical == 7
        assert snapshot.skill_breakdown.clarity == 7
        assert snapshot.skill_breakdown.confidence == 6
        assert snapshot.skill_breakdown.communication == 9

    def test_recent_keeps_last_five(self):
        records = [
            SessionRecord(session_id=str(i), started_at=datetime(2024, 1, i + 1), overall_score=score)
            for i, score in enumerate([10, 20, 30, 40, 50, 60, 70])
        ]
        snapshot = build_analytics_snapshot(records)

        assert snapshot.recent_performance == [30, 40, 50, 60, 70]
        assert snapshot.average_score == 40
        assert snapshot.skill_breakdown.technical == 0

    def test_average_rounds_half_up(self):
        records = [
            SessionRecord(session_id="1", overall_score=50),
            SessionRecord(session_id="2", overall_score=51),
        ]
        assert build_analytics_snapshot(records).average_score == 51

    def test_unlabelled_raw_scores_are_migrated(self):
        record = SessionRecord(
            session_id="legacy",
            overall_score=72,
            evaluations=[StoredAnswerEvaluation(technical=75, clarity=8, confidence=64, score=9)],
        )
        breakdown = build_analytics_snapshot([record]).skill_breakdown

        assert breakdown.technical == 8
        assert breakdown.clarity == 8
        assert breakdown.confidence == 6
        assert breakdown.communication == 9

    def test_mixed_naive_and_aware_start_times(self):
        records = [
            SessionRecord(session_id="naive", started_at=datetime(2024, 1, 2), overall_score=80),
            SessionRecord(
                session_id="aware",
                started_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
                overall_score=60,
            ),
            SessionRecord(
                session_id="offset",
                started_at=datetime(2024, 1, 3, 1, 0, tzinfo=timezone(timedelta(hours=5))),
                overall_score=90,
            ),
        ]
        snapshot = build_analytics_snapshot(records)

        # 2024-01-03 01:00+05:00 is 2024-01-02 20:00 UTC
        assert snapshot.recent_performance == [60, 80, 90]
        assert snapshot.score_trend == ScoreTrend.IMPROVING
