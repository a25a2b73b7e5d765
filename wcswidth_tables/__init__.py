"""
wcswidth_tables module.

Fetches the Unicode Character Database and generates the wide and zero width
lookup tables from which the display width of a string is computed.
"""
# local
from .fetch import DEFAULT_BASE_URL, UnicodeDataClient
from .errors import (TableWriteError,
                     UnicodeDataError,
                     VersionNotFoundError,
                     PatternNotMatchedError)
from .render import write_table, render_table
from .extract import (WIDE,
                      ZERO,
                      RangeTable,
                      TableDefinition,
                      parse_date,
                      find_entries,
                      extract_table,
                      parse_version,
                      format_ranges)
from .generate import WcswidthDataGenerator

__all__ = ('WcswidthDataGenerator', 'UnicodeDataClient', 'extract_table',
           'render_table', 'write_table', 'UnicodeDataError')
__version__ = '0.1.0'
