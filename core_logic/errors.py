# SqliteTypes/core_logic/errors.py
from typing import Optional


class TypeGenerationError(Exception):
    """Base class for every failure that aborts a generation run."""


class MissingArgumentError(TypeGenerationError):
    """A required command-line value (--db or --output) was not given."""


class UnknownColumnTypeError(TypeGenerationError):
    """A column's declared SQL type has no TypeScript mapping."""

    def __init__(self, sql_type: str, table_name: Optional[str] = None, column_name: Optional[str] = None):
        self.sql_type = sql_type
        self.table_name = table_name
        self.column_name = column_name
        location = f" (column '{table_name}.{column_name}')" if table_name and column_name else ""
        super().__init__(f"Unknown type: {sql_type}{location}")


class DatabaseError(TypeGenerationError):
    """Opening, bootstrapping or querying the SQLite database failed."""


class FormatterError(TypeGenerationError):
    """The generated source could not be parsed by the formatter."""

    def __init__(self, message: str, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"{message} ({line}:{column})")


class FileWriteError(TypeGenerationError):
    """The formatted output could not be written."""
