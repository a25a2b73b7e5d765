"""Exceptions raised while generating wcswidth tables."""


class UnicodeDataError(RuntimeError):
    """Base class of all table generation errors."""


class VersionNotFoundError(UnicodeDataError):
    """The leading ``# <Source>-<version>.txt`` comment line is missing."""

    def __init__(self, source_name: str):
        super().__init__('The Unicode version could not be determined.')
        self.source_name = source_name


class PatternNotMatchedError(UnicodeDataError):
    """No line of the source document matched the entry pattern."""

    def __init__(self, table_name: str):
        super().__init__(f'The {table_name} width pattern did not match anything.')
        self.table_name = table_name


class TableWriteError(UnicodeDataError):
    """The generated table could not be persisted."""

    def __init__(self, file_name: str):
        super().__init__(f'The "{file_name}" file could not be written.')
        self.file_name = file_name
