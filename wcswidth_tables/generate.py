"""Generate the wide and zero width tables used to compute wcswidth."""
from __future__ import annotations

# std imports
from typing import Mapping

# local
from .fetch import UnicodeDataClient
from .render import write_table
from .extract import WIDE, ZERO, TableDefinition, extract_table


class WcswidthDataGenerator:
    """
    Fetch, extract and write both tables into ``out_dir``.

    ``file_names`` maps a table name, ``'wide'`` or ``'zero'``, to the name
    of its output file; the extension selects the output language.
    """

    def __init__(self, out_dir: str, client: UnicodeDataClient | None = None,
                 file_names: Mapping[str, str] | None = None):
        self.out_dir = out_dir
        self.client = client if client is not None else UnicodeDataClient()
        self.file_names = {WIDE.name: WIDE.file_name,
                           ZERO.name: ZERO.file_name,
                           **(file_names or {})}

    def generate(self) -> list[str]:
        """Write both tables, return their paths. The first error aborts."""
        return [self.write_wide_width_data(),
                self.write_zero_width_data()]

    def write_wide_width_data(self) -> str:
        return self._write(WIDE)

    def write_zero_width_data(self) -> str:
        return self._write(ZERO)

    def _write(self, table_def: TableDefinition) -> str:
        content = self.client.fetch(table_def.source_path)
        table = extract_table(content, table_def,
                              file_name=self.file_names[table_def.name])
        return write_table(table, self.out_dir)
