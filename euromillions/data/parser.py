"""Parser for the delimited EuroMillions history file.

Expected layout, one draw per line, most recent first::

    draw_id;dd/MM/yyyy;b1;b2;b3;b4;b5;s1;s2[;...]

Rows that are too short or hold unparsable values are skipped and
counted, the rest of the file is still used.
"""

from datetime import date, datetime
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from euromillions.config import settings
from euromillions.errors import (
    InvalidDateFormatError,
    InvalidFormatError,
    InvalidNumberFormatError,
)

DATE_COLUMN = 1
BALL_COLUMNS = range(2, 7)
STAR_COLUMNS = range(7, 9)
MIN_COLUMNS = 9


class DrawRecord(BaseModel):
    draw_date: date
    numbers: list[int]
    stars: list[int]


class ParsingStatistics(BaseModel):
    processed_rows: int = 0
    skipped_rows: int = 0


class ParsedHistory(BaseModel):
    records: list[DrawRecord]
    statistics: ParsingStatistics

    @property
    def draws(self) -> list[list[int]]:
        return [record.numbers for record in self.records]

    @property
    def stars(self) -> list[list[int]]:
        return [record.stars for record in self.records]

    @property
    def dates(self) -> list[date]:
        return [record.draw_date for record in self.records]


def _parse_int(value: str, max_value: int) -> int:
    try:
        number = int(value.strip())
    except ValueError:
        raise InvalidNumberFormatError(value) from None
    if not 1 <= number <= max_value:
        raise InvalidNumberFormatError(value)
    return number


def _parse_row(columns: list[str], date_format: str) -> DrawRecord:
    """Turn the split columns of one line into a DrawRecord."""
    raw_date = columns[DATE_COLUMN].strip()
    try:
        draw_date = datetime.strptime(raw_date, date_format).date()
    except ValueError:
        raise InvalidDateFormatError(raw_date) from None

    numbers = [_parse_int(columns[i], settings.MAX_NUMBER) for i in BALL_COLUMNS]
    stars = [_parse_int(columns[i], settings.MAX_STAR) for i in STAR_COLUMNS]
    return DrawRecord(draw_date=draw_date, numbers=numbers, stars=stars)


def parse_history(
    content: str,
    separator: str = settings.CSV_SEPARATOR,
    has_header: bool = settings.CSV_HAS_HEADER,
    date_format: str = settings.CSV_DATE_FORMAT,
) -> ParsedHistory:
    """Parse the whole file content, row order preserved.

    Raises:
        InvalidFormatError: no data row at all.
    """
    lines = [line for line in content.splitlines() if line.strip()]
    start = 1 if has_header else 0
    if len(lines) <= start:
        raise InvalidFormatError()

    records: list[DrawRecord] = []
    stats = ParsingStatistics()

    for line_number, line in enumerate(lines[start:], start=start + 1):
        columns = line.split(separator)
        if len(columns) < MIN_COLUMNS:
            logger.warning("Line {} has {} columns, skipped", line_number, len(columns))
            stats.skipped_rows += 1
            continue
        try:
            records.append(_parse_row(columns, date_format))
        except (InvalidDateFormatError, InvalidNumberFormatError) as e:
            logger.warning("Line {} skipped: {}", line_number, e.description)
            stats.skipped_rows += 1
            continue
        stats.processed_rows += 1

    logger.info(
        "Parsed history: {} draws, {} rows skipped",
        stats.processed_rows, stats.skipped_rows,
    )
    return ParsedHistory(records=records, statistics=stats)


def load_history_file(path: Path, **kwargs) -> ParsedHistory:
    """Parse a history file.

    Raises:
        InvalidFormatError: the file is not UTF-8 text or holds no data row.
        OSError: the file cannot be read.
    """
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidFormatError(
            f"History file {path} is not UTF-8 text (byte {e.start})"
        ) from e
    return parse_history(content, **kwargs)
