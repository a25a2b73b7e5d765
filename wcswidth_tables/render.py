"""Code generation of range tables, using jinja2 templates."""
from __future__ import annotations

# std imports
import os
import string
import unicodedata
from dataclasses import field, dataclass
from typing import Any, Self, Iterator

# 3rd party
import jinja2

# local
from .errors import TableWriteError
from .extract import RangeTable

JINJA_ENV = jinja2.Environment(
    loader=jinja2.PackageLoader('wcswidth_tables', 'code_templates'),
    keep_trailing_newline=True)

# output file extension -> template
TEMPLATES = {
    '.php': 'php_table.php.j2',
    '.py': 'python_table.py.j2',
}


def name_ucs(ucs: str) -> str | None:
    try:
        return string.capwords(unicodedata.name(ucs))
    except ValueError:
        return None


def hex_range_descriptions(ranges: list[tuple[int, int]]) -> list[tuple[str, str, str]]:
    """Convert integers into string table of (hex_start, hex_end, txt_description)."""
    pytable_values: list[tuple[str, str, str]] = []
    for start, end in ranges:
        hex_start, hex_end = f'0x{start:05x}', f'0x{end:05x}'
        name_start = name_ucs(chr(start)) or '(nil)'
        name_end = name_ucs(chr(end)) or '(nil)'
        if name_start != name_end:
            txt_description = f'{name_start[:24].rstrip():24s}..{name_end[:24].rstrip()}'
        else:
            txt_description = f'{name_start[:48]}'
        pytable_values.append((hex_start, hex_end, txt_description))
    return pytable_values


@dataclass
class TableRenderDef:
    """A :class:`RangeTable` bound to the template of its output language."""
    jinja_filename: str
    table: RangeTable

    _template: jinja2.Template = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._template = JINJA_ENV.get_template(self.jinja_filename)

    @classmethod
    def new(cls, table: RangeTable) -> Self:
        _, ext = os.path.splitext(table.file_name)
        if ext not in TEMPLATES:
            raise ValueError(f'filename must be a PHP or a Python file: {table.file_name!r}')
        return cls(jinja_filename=TEMPLATES[ext], table=table)

    @property
    def render_context(self) -> dict[str, Any]:
        table = self.table
        context = {
            'description': table.definition.description,
            'variable_name': table.definition.variable_name,
            'version': table.version,
            'source_filename': table.source_filename,
            'source_date': table.date,
            'generated': table.generated,
            'ranges': table.ranges,
        }
        if self.jinja_filename.endswith('.py.j2'):
            context['hex_range_descriptions'] = hex_range_descriptions(table.ranges)
        return context

    def render(self) -> str:
        """Just like jinja2.Template.render."""
        return self._template.render(self.render_context)

    def generate(self) -> Iterator[str]:
        """Just like jinja2.Template.generate."""
        return self._template.generate(self.render_context)


def render_table(table: RangeTable) -> str:
    return TableRenderDef.new(table).render()


def write_table(table: RangeTable, out_dir: str) -> str:
    """
    Render ``table`` into directory ``out_dir``, return the path written.

    :raises TableWriteError: the file could not be written, the cause is chained.
    """
    render_def = TableRenderDef.new(table)
    path = os.path.join(out_dir, table.file_name)
    print(f'write {path}: ', end='', flush=True)
    written = 0
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as fout:
            for data in render_def.generate():
                written += fout.write(data)
    except OSError as err:
        raise TableWriteError(table.file_name) from err
    if not written:
        raise TableWriteError(table.file_name)
    print('ok')
    return path
