"""Normalization of provider departure times into comparable instants."""

import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# "7:45" or "07:45"; the AM/PM marker is split off beforehand
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
MERIDIEM_MARKERS = ("AM", "PM")


def parse_clock_text(text: str) -> tuple[int, int] | None:
    """Parse "H:MM" with an optional AM/PM marker into a 24-hour (hour, minute) pair.

    The text is split on whitespace (this includes the narrow no-break space the
    maps provider puts before the marker). With a marker the hour must be 1-12
    and is converted with the usual 12-hour convention; without one the hour is
    read as 24-hour time.

    Returns:
        (hour, minute) or None if the text is not a recognizable clock time.
    """
    if not text:
        return None

    parts = text.split()
    if len(parts) == 1:
        clock, marker = parts[0], None
    elif len(parts) == 2:
        clock, marker = parts[0], parts[1].upper()
        if marker not in MERIDIEM_MARKERS:
            return None
    else:
        return None

    match = CLOCK_PATTERN.match(clock)
    if not match:
        return None

    hour, minute = int(match.group(1)), int(match.group(2))
    if minute > 59:
        return None

    if marker is None:
        return (hour, minute) if hour <= 23 else None

    if not 1 <= hour <= 12:
        return None
    if marker == "PM" and hour != 12:
        hour += 12
    elif marker == "AM" and hour == 12:
        hour = 0
    return hour, minute


class DepartureTimeNormalizer:
    """Turns provider departure times into timezone-aware instants.

    When the provider supplies an epoch value it is trusted over the display
    text. Text times are anchored to the current calendar day in the provider's time zone
    (or the configured default zone when the provider gives none).
    """

    def __init__(
        self,
        default_timezone: str = "UTC",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the normalizer.

        Args:
            default_timezone: IANA zone used when the provider gives no time zone.
            clock: Returns the current aware datetime; defaults to datetime.now(UTC).
        """
        self._default_zone = ZoneInfo(default_timezone)
        self._clock = clock or (lambda: datetime.now(UTC))

    def now(self) -> datetime:
        """Return the current instant used as the evaluation time."""
        return self._clock()

    def normalize(
        self,
        raw_text: str,
        epoch_seconds: int | float | None = None,
        time_zone: str | None = None,
        now: datetime | None = None,
    ) -> datetime | None:
        """Normalize one departure time.

        Args:
            raw_text: Display text such as "7:45 PM".
            epoch_seconds: Provider epoch value, preferred when present.
            time_zone: Provider IANA time zone name, if any.
            now: Evaluation instant; defaults to the normalizer clock.

        Returns:
            An aware datetime, or None when neither source can be parsed.
        """
        zone = self._resolve_zone(time_zone)

        if epoch_seconds is not None:
            instant = self._from_epoch(epoch_seconds, zone)
            if instant is not None:
                return instant
            logger.debug(f"Ignoring invalid epoch value {epoch_seconds!r}, parsing '{raw_text}'")

        return self.parse_text(raw_text, zone, now)

    def parse_text(
        self, raw_text: str, zone: ZoneInfo | None = None, now: datetime | None = None
    ) -> datetime | None:
        """Parse display text into an instant on today's date in the given zone."""
        parsed = parse_clock_text(raw_text)
        if parsed is None:
            if raw_text:
                logger.debug(f"Unparsable departure time text: '{raw_text}'")
            return None

        zone = zone or self._default_zone
        reference = (now or self.now()).astimezone(zone)
        hour, minute = parsed
        return datetime.combine(reference.date(), time(hour, minute), tzinfo=zone)

    def _resolve_zone(self, time_zone: str | None) -> ZoneInfo:
        """Look up the provider zone, falling back to the default zone."""
        if not time_zone:
            return self._default_zone
        try:
            return ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug(f"Unknown time zone '{time_zone}', using {self._default_zone.key}")
            return self._default_zone

    @staticmethod
    def _from_epoch(epoch_seconds: int | float, zone: ZoneInfo) -> datetime | None:
        """Convert an epoch value to an aware datetime in the given zone."""
        if isinstance(epoch_seconds, bool) or not isinstance(epoch_seconds, (int, float)):
            return None
        try:
            return datetime.fromtimestamp(epoch_seconds, tz=zone)
        except (OverflowError, OSError, ValueError):
            return None
