"""Date format detection and parsing for time columns.

Detection is column-wide: a single layout is chosen from the largest leading
integer across all values (parsing '12-10' gives 12), then every value is
parsed with that layout.

- Integers between year_min and year_max (or a YEAR subtype): bare years
- Leading integer above 31: ISO 8601 (yyyy-mm, yyyy-mm-dd, yyyy-mm-ddThh:mm:ss)
- Leading integer above 12: day first (dd-mm-yyyy, dd/mm/yyyy)
- Otherwise: month first (mm-dd-yyyy, mm/dd/yyyy)

Columns mixing day-first and month-first rows are not disambiguated; they are
parsed with whichever layout the column-wide maximum selects.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from colmodel.analysis.temporal.models import DateFormat, DateParseResult
from colmodel.analysis.typing.values import is_integer, leading_integer, to_number
from colmodel.core.config import Settings, get_settings
from colmodel.core.logging import get_logger
from colmodel.core.models.base import CellValue, VarSubType

logger = get_logger(__name__)

_DATE_SEPARATOR_RE = re.compile(r"[/-]")
_TIME_SEPARATOR_RE = re.compile(r"(?<=\d)T")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")

DateParser = Callable[[CellValue], datetime]


def first_position_maximum(values: Sequence[CellValue]) -> int:
    """Largest leading integer across values, or 0 if none is positive."""
    maximum = 0
    for value in values:
        first_position = leading_integer(value)
        if first_position is not None and first_position > maximum:
            maximum = first_position
    return maximum


def detect_date_format(
    values: Sequence[CellValue],
    subtype: VarSubType | None = None,
    settings: Settings | None = None,
) -> DateFormat:
    """Guess the date layout of a column from its values.

    Args:
        values: Raw cell values
        subtype: Current subtype; YEAR forces the bare-year layout
        settings: Settings holding the year range (defaults to get_settings())

    Returns:
        The detected DateFormat
    """
    settings = settings or get_settings()
    maximum = first_position_maximum(values)

    if subtype == VarSubType.YEAR or (
        settings.year_min <= maximum <= settings.year_max
        and all(is_integer(value) for value in values)
    ):
        return DateFormat.YEAR
    if maximum > 31:
        return DateFormat.ISO8601
    if maximum > 12:
        return DateFormat.DAY_FIRST
    return DateFormat.MONTH_FIRST


def to_utc(instant: datetime) -> datetime:
    """Make an instant timezone-aware UTC; naive instants are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def _require_text(value: CellValue) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{value!r} is not a date string")
    return value.strip()


def swap_date_format(text: str) -> str:
    """Swap the first two fields of a three-part date, eg. '30-12-2015' -> '12/30/2015'."""
    parts = _DATE_SEPARATOR_RE.split(text)
    if len(parts) == 3:
        return f"{parts[1]}/{parts[0]}/{parts[2]}"
    return text


def replace_hyphens_and_convert_time(text: str) -> str:
    """Normalize a month-first date for layout parsing.

    Hyphens become slashes in a three-part date, and an ISO style time is
    reattached after a space without fractional seconds or zone designator,
    eg. '4-6-2015T10:30:15.250Z' -> '4/6/2015 10:30:15'.
    """
    time = ""
    match = _TIME_SEPARATOR_RE.search(text)
    if match:
        times = text[match.end() :].split(":")
        if len(times) > 1:
            time = f" {times[0]}:{times[1]}"
        if len(times) > 2:
            seconds = leading_integer(times[2])
            if seconds is not None:
                time = f"{time}:{seconds}"
        text = text[: match.start()]
    parts = text.split("-")
    if len(parts) == 3:
        text = "/".join(parts)
    return text + time


def parse_with_layouts(text: str, layouts: Sequence[str]) -> datetime:
    """Parse text with the first matching strptime layout.

    Raises:
        ValueError: If no layout matches
    """
    for layout in layouts:
        try:
            return datetime.strptime(text, layout)
        except ValueError:
            continue
    raise ValueError(f"{text!r} matches no known date layout")


def parse_year(value: CellValue) -> datetime:
    """Parse a bare year as January 1st of that year."""
    if not is_integer(value):
        raise ValueError(f"{value!r} is not a year")
    number = to_number(value)
    assert number is not None
    return datetime(int(number), 1, 1, tzinfo=UTC)


def parse_iso8601(value: CellValue) -> datetime:
    """Parse an ISO 8601 date or date-time.

    Reduced precision year-month values, eg. '2015-01', give the first of the month.
    """
    text = _require_text(value)
    match = _YEAR_MONTH_RE.match(text)
    if match:
        return datetime(int(match.group(1)), int(match.group(2)), 1, tzinfo=UTC)
    return datetime.fromisoformat(text)


def make_parser(date_format: DateFormat, settings: Settings | None = None) -> DateParser:
    """Build the per-value parser for a detected date format."""
    layouts = (settings or get_settings()).date_layouts

    if date_format == DateFormat.YEAR:
        return parse_year
    if date_format == DateFormat.ISO8601:
        return parse_iso8601
    if date_format == DateFormat.DAY_FIRST:
        return lambda value: parse_with_layouts(swap_date_format(_require_text(value)), layouts)
    return lambda value: parse_with_layouts(
        replace_hyphens_and_convert_time(_require_text(value)), layouts
    )


def parse_instants(
    values: Sequence[CellValue],
    subtype: VarSubType | None = None,
    settings: Settings | None = None,
) -> DateParseResult:
    """Parse every value of a column as an instant.

    Parsing stops at the first value that cannot be parsed; the result then
    carries that literal and no instants, since a time column needs an
    instant for every row.

    Args:
        values: Raw cell values
        subtype: Current subtype of the column
        settings: Settings (defaults to get_settings())

    Returns:
        DateParseResult with one UTC instant per value, or the failing literal
    """
    settings = settings or get_settings()
    date_format = detect_date_format(values, subtype, settings)
    parser = make_parser(date_format, settings)

    instants: list[datetime] = []
    for index, value in enumerate(values):
        try:
            instants.append(to_utc(parser(value)))
        except (ValueError, OverflowError) as e:
            logger.warning(
                "date_parse_failed",
                value=value,
                index=index,
                date_format=date_format.value,
                error=str(e),
            )
            return DateParseResult(
                date_format=date_format,
                failed_value=value,
                failed_index=index,
                error=f"Unable to parse date {value!r}: {e}",
            )

    return DateParseResult(
        date_format=date_format,
        subtype=VarSubType.YEAR if date_format == DateFormat.YEAR else None,
        instants=instants,
    )
