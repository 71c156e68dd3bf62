# SqliteTypes/core_logic/sqlite_connector.py
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List, Optional
import logging

from config.settings import SQLITE_URI_PREFIX
from core_logic.errors import DatabaseError

db_logger = logging.getLogger('SqliteTypes.Database')


class SQLiteConnector:
    """
    Thin wrapper around a SQLAlchemy engine bound to one SQLite file.
    Every engine failure surfaces as DatabaseError.
    """
    def __init__(self, db_path: str):
        # SQLite creates the file on first connect if it does not exist.
        self.db_uri = f"{SQLITE_URI_PREFIX}{db_path}"
        try:
            self.engine = create_engine(self.db_uri)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Could not open database '{db_path}': {e}") from e

    def quote_identifier(self, name: str) -> str:
        return self.engine.dialect.identifier_preparer.quote_identifier(name)

    def execute_ddl(self, statements: List[str]) -> None:
        """Runs the statements in a single transaction."""
        try:
            with self.engine.begin() as connection:
                for statement in statements:
                    connection.execute(text(statement))
        except SQLAlchemyError as e:
            raise DatabaseError(f"Schema initialization failed: {e}") from e

    def fetch_rows(self, sql_query: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Executes a read query and returns rows as dicts."""
        try:
            with self.engine.connect() as connection:
                result = connection.execute(text(sql_query), params or {})
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database query failed: {e}") from e

    def fetch_pragma(self, pragma: str, table_name: str) -> List[Dict[str, Any]]:
        """
        Runs `PRAGMA <pragma>(<table>)`. The statement goes to the driver
        verbatim so quoted identifiers containing ':' are not taken for
        bind parameters.
        """
        statement = f"PRAGMA {pragma}({self.quote_identifier(table_name)})"
        try:
            with self.engine.connect() as connection:
                result = connection.exec_driver_sql(statement)
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database query failed ({statement}): {e}") from e

    def dispose(self) -> None:
        db_logger.debug(f"Disposing engine for {self.db_uri}")
        self.engine.dispose()
