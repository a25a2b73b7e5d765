"""
Extract codepoint ranges from Unicode Character Database text files.

See details: https://www.unicode.org/reports/tr44/#Format_Conventions
"""
from __future__ import annotations

# std imports
import re
import datetime
from dataclasses import dataclass

# 3rd party
import dateutil.parser

# local
from .errors import VersionNotFoundError, PatternNotMatchedError

HEX_CODEPOINT = r'[0-9A-F]{4,}'
DATE_PATTERN = re.compile(r'^# Date: (.+)$', re.MULTILINE)


@dataclass(frozen=True)
class TableDefinition:
    """Where to find one dataset and which of its lines to keep."""
    name: str
    description: str
    source_name: str
    source_path: str
    entry_pattern: re.Pattern
    file_name: str
    variable_name: str

    @property
    def header_pattern(self) -> re.Pattern:
        """Match the leading comment line, such as ``# EastAsianWidth-15.1.0.txt``."""
        return re.compile(rf'# {re.escape(self.source_name)}-(\d+\.\d+\.\d+)\.txt')


# F  Fullwidth
# W  Wide
WIDE = TableDefinition(
    name='wide',
    description='Wide and Fullwidth East Asian Width',
    source_name='EastAsianWidth',
    source_path='EastAsianWidth.txt',
    entry_pattern=re.compile(
        rf'^({HEX_CODEPOINT})(?:\.\.({HEX_CODEPOINT}))? *; *[WF]', re.MULTILINE),
    file_name='wcswidth_table_wide.php',
    variable_name='WIDE_EASTASIAN',
)

# Me Enclosing Mark
# Mn Nonspacing Mark
ZERO = TableDefinition(
    name='zero',
    description='Zero width General Category (Me, Mn)',
    source_name='DerivedGeneralCategory',
    source_path='extracted/DerivedGeneralCategory.txt',
    entry_pattern=re.compile(
        rf'^({HEX_CODEPOINT})(?:\.\.({HEX_CODEPOINT}))? *; (?:Me|Mn)', re.MULTILINE),
    file_name='wcswidth_table_zero.php',
    variable_name='ZERO_WIDTH',
)

TABLE_DEFINITIONS = (WIDE, ZERO)


@dataclass
class RangeTable:
    """Sorted codepoint ranges of one dataset, ready to be rendered."""
    definition: TableDefinition
    file_name: str
    version: str
    date: str | None
    generated: str
    ranges: list[tuple[int, int]]

    @property
    def source_filename(self) -> str:
        """Name of the source file, including its version, ``EastAsianWidth-15.1.0.txt``."""
        return f'{self.definition.source_name}-{self.version}.txt'


def parse_version(content: str, table_def: TableDefinition) -> str:
    """Return unicode version declared by the first line of ``content``."""
    match = table_def.header_pattern.match(content)
    if match is None:
        raise VersionNotFoundError(table_def.source_name)
    return match.group(1)


def parse_date(content: str) -> str | None:
    """
    Return the ``# Date:`` header line of ``content`` as an ISO-8601 string.

    The line is returned verbatim when it cannot be parsed, and ``None`` when
    there is none.
    """
    match = DATE_PATTERN.search(content)
    if match is None:
        return None
    date_str = match.group(1).strip()
    try:
        # older files append editor initials, '2017-03-08, 02:00:00 GMT [KW, LI]'
        return dateutil.parser.parse(date_str, fuzzy=True).isoformat()
    except (ValueError, OverflowError):
        return date_str


def find_entries(content: str, table_def: TableDefinition) -> list[tuple[str, str | None]]:
    """Return ``(hex_start, hex_end)`` of every matching line, ``hex_end`` is None for a single value."""
    entries = [(start, end or None)
               for start, end in table_def.entry_pattern.findall(content)]
    if not entries:
        raise PatternNotMatchedError(table_def.name)
    return entries


def format_ranges(entries: list[tuple[str, str | None]]) -> list[tuple[int, int]]:
    """Convert hexadecimal entries to integer ranges, sorted by their start."""
    ranges = [(int(start, 16), int(end or start, 16)) for start, end in entries]
    # stable, equal starts keep the order of the source file
    ranges.sort(key=lambda value_range: value_range[0])
    return ranges


def utc_now() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat(timespec='seconds')


def extract_table(content: str, table_def: TableDefinition,
                  file_name: str | None = None, now: str | None = None) -> RangeTable:
    """Parse a fetched source document into a :class:`RangeTable`."""
    version = parse_version(content, table_def)
    ranges = format_ranges(find_entries(content, table_def))
    return RangeTable(definition=table_def,
                      file_name=file_name or table_def.file_name,
                      version=version,
                      date=parse_date(content),
                      generated=now or utc_now(),
                      ranges=ranges)
