"""Tests for departure time normalization."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from nearby_departures.application.services.departure_time_normalizer import (
    DepartureTimeNormalizer,
    parse_clock_text,
)

NEW_YORK = ZoneInfo("America/New_York")
NOW = datetime(2026, 10, 18, 15, 0, tzinfo=NEW_YORK)


@pytest.fixture
def normalizer() -> DepartureTimeNormalizer:
    """Create a normalizer with a fixed clock in New York."""
    return DepartureTimeNormalizer(default_timezone="America/New_York", clock=lambda: NOW)


class TestParseClockText:
    """Tests for parse_clock_text."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("7:45 PM", (19, 45)),
            ("12:05 AM", (0, 5)),
            ("12:30 PM", (12, 30)),
            ("1:00 AM", (1, 0)),
            ("11:59 PM", (23, 59)),
            ("07:45 pm", (19, 45)),
            ("7:45\u202fPM", (19, 45)),
            ("19:45", (19, 45)),
            ("0:05", (0, 5)),
        ],
    )
    def test_when_text_is_clock_time_then_returns_24h_pair(
        self, text: str, expected: tuple[int, int]
    ) -> None:
        """Given a recognizable clock time, when parsing, then returns the 24-hour pair."""
        assert parse_clock_text(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "soon", "745 PM", "7:45 XM", "13:00 PM", "0:30 AM", "7:60 PM", "24:00", "7:5 PM",
         "Tomorrow 7:45 PM", "7:45PM"],
    )
    def test_when_text_is_not_clock_time_then_returns_none(self, text: str) -> None:
        """Given text that is not H:MM [AM|PM], when parsing, then returns None."""
        assert parse_clock_text(text) is None


class TestNormalize:
    """Tests for DepartureTimeNormalizer.normalize."""

    @pytest.mark.parametrize(
        ("text", "hour", "minute"),
        [("7:45 PM", 19, 45), ("12:05 AM", 0, 5), ("12:30 PM", 12, 30)],
    )
    def test_when_text_only_then_anchored_to_today(
        self, normalizer: DepartureTimeNormalizer, text: str, hour: int, minute: int
    ) -> None:
        """Given only display text, when normalizing, then the instant is today at that time."""
        result = normalizer.normalize(text)

        assert result == datetime(2026, 10, 18, hour, minute, tzinfo=NEW_YORK)

    def test_when_epoch_present_then_epoch_wins_over_text(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given an epoch just after midnight and matching text, when normalizing, then uses the epoch date."""
        after_midnight = datetime(2026, 10, 19, 0, 10, tzinfo=NEW_YORK)

        result = normalizer.normalize(
            "12:10 AM", epoch_seconds=int(after_midnight.timestamp()), time_zone="America/New_York"
        )

        assert result == after_midnight
        assert result is not None and result.date().day == 19

    def test_when_epoch_invalid_then_falls_back_to_text(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given an unusable epoch value, when normalizing, then the text is parsed instead."""
        result = normalizer.normalize("7:45 PM", epoch_seconds=True)  # type: ignore[arg-type]

        assert result == datetime(2026, 10, 18, 19, 45, tzinfo=NEW_YORK)

    def test_when_nothing_parsable_then_returns_none(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given unparsable text and no epoch, when normalizing, then returns None without raising."""
        assert normalizer.normalize("departs soon") is None
        assert normalizer.normalize("") is None

    def test_when_provider_zone_given_then_text_uses_its_calendar_day(self) -> None:
        """Given a provider zone where it is still yesterday, when normalizing text, then uses that day."""
        utc_now = datetime(2026, 10, 18, 2, 0, tzinfo=UTC)  # 22:00 on the 17th in New York
        normalizer = DepartureTimeNormalizer(default_timezone="UTC", clock=lambda: utc_now)

        result = normalizer.normalize("7:45 PM", time_zone="America/New_York")

        assert result == datetime(2026, 10, 17, 19, 45, tzinfo=NEW_YORK)

    def test_when_provider_zone_unknown_then_default_zone_is_used(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given an unknown provider zone, when normalizing, then the default zone is used."""
        result = normalizer.normalize("7:45 PM", time_zone="Mars/Olympus_Mons")

        assert result == datetime(2026, 10, 18, 19, 45, tzinfo=NEW_YORK)

    def test_when_now_passed_then_it_overrides_clock(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given an explicit evaluation instant, when normalizing, then its day is used."""
        other_day = datetime(2026, 1, 2, 9, 0, tzinfo=NEW_YORK)

        result = normalizer.normalize("7:45 AM", now=other_day)

        assert result == datetime(2026, 1, 2, 7, 45, tzinfo=NEW_YORK)

    def test_results_are_comparable_across_sources(
        self, normalizer: DepartureTimeNormalizer
    ) -> None:
        """Given epoch and text instants, when comparing, then they order correctly."""
        from_text = normalizer.normalize("7:45 PM")
        from_epoch = normalizer.normalize(
            "", epoch_seconds=int(datetime(2026, 10, 18, 23, 0, tzinfo=UTC).timestamp())
        )

        assert from_text is not None and from_epoch is not None
        assert from_epoch < from_text  # 23:00 UTC is 19:00 in New York


def test_now_uses_injected_clock(normalizer: DepartureTimeNormalizer) -> None:
    """Given an injected clock, when asking for now, then returns the clock value."""
    assert normalizer.now() == NOW


def test_default_clock_is_timezone_aware() -> None:
    """Given no clock, when asking for now, then returns an aware datetime."""
    assert DepartureTimeNormalizer().now().tzinfo is not None
