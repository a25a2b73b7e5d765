"""
Command-line entry point, writes both tables to the given directory.

This is typically executed through tox,

$ tox -e update -- path/to/Resources/data
"""
# std imports
import os
import argparse

# local
from .fetch import DEFAULT_BASE_URL, UnicodeDataClient
from .extract import TABLE_DEFINITIONS
from .generate import WcswidthDataGenerator


def get_argparser():
    parser = argparse.ArgumentParser(
        prog='wcswidth-tables',
        description='Fetch Unicode data files and generate wcswidth lookup tables.')
    parser.add_argument('out_dir', help='existing directory to write tables to')
    parser.add_argument('--base-url', default=DEFAULT_BASE_URL,
                        help='base url of the Unicode Character Database (default: %(default)s)')
    parser.add_argument('--format', choices=('php', 'py'), default='php',
                        help='language of the generated tables (default: %(default)s)')
    return parser


def main(args=None):
    """Program entry point."""
    parser = get_argparser()
    opts = parser.parse_args(args)
    if not os.path.isdir(opts.out_dir):
        parser.error(f'not a directory: {opts.out_dir}')

    file_names = {table_def.name: f'wcswidth_table_{table_def.name}.{opts.format}'
                  for table_def in TABLE_DEFINITIONS}
    generator = WcswidthDataGenerator(opts.out_dir,
                                      client=UnicodeDataClient(base_url=opts.base_url),
                                      file_names=file_names)
    generator.generate()
