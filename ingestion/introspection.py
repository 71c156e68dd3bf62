# SqliteTypes/ingestion/introspection.py
from typing import List, Optional
from config.bootstrap_schema import BOOTSTRAP_STATEMENTS
from config.settings import SYSTEM_TABLE_PREFIX
from core_logic.data_models import TableSchema, ColumnSchema, ForeignKey
from core_logic.sqlite_connector import SQLiteConnector
import logging

ingestion_logger = logging.getLogger('SqliteTypes.Introspection')

# LIKE treats '_' as a wildcard, so the prefix is escaped.
SELECT_TABLES_QUERY = """
SELECT
    name
FROM
    sqlite_master
WHERE
    type = 'table' AND
    name NOT LIKE :system_prefix ESCAPE '\\'
"""


class SQLiteIntrospectionModule:
    """
    Reads table, column and foreign key metadata from a SQLite catalog.
    The database file is created if it does not exist yet.
    """
    def __init__(self, db_path: str, connector: Optional[SQLiteConnector] = None):
        self.db_path = db_path
        self.connector = connector or SQLiteConnector(db_path)

    def initialize_schema(self) -> None:
        """Creates the demo tables if they are missing. Safe to run repeatedly."""
        ingestion_logger.info(f"Ensuring demo schema exists in '{self.db_path}'.")
        self.connector.execute_ddl(BOOTSTRAP_STATEMENTS)

    def get_table_names(self) -> List[str]:
        """User tables in catalog (creation) order."""
        escaped_prefix = SYSTEM_TABLE_PREFIX.replace("\\", "\\\\").replace("_", "\\_").replace("%", "\\%")
        rows = self.connector.fetch_rows(SELECT_TABLES_QUERY, {"system_prefix": f"{escaped_prefix}%"})
        return [row["name"] for row in rows]

    def _get_foreign_keys(self, table_name: str) -> List[ForeignKey]:
        return [
            ForeignKey(
                source_column=fk["from"],
                target_table=fk["table"],
                target_column=fk["to"],
            )
            for fk in self.connector.fetch_pragma("foreign_key_list", table_name)
        ]

    def _get_columns(self, table_name: str, foreign_keys: List[ForeignKey]) -> List[ColumnSchema]:
        columns = []
        for col in self.connector.fetch_pragma("table_info", table_name):
            # First matching entry wins; composite keys are not modelled.
            foreign_key = next((fk for fk in foreign_keys if fk.source_column == col["name"]), None)
            columns.append(ColumnSchema(
                name=col["name"],
                data_type=col["type"] or "",
                not_null=bool(col["notnull"]),
                primary_key=bool(col["pk"]),
                foreign_key=foreign_key,
            ))
        return columns

    def get_table_schema(self, table_name: str) -> TableSchema:
        foreign_keys = self._get_foreign_keys(table_name)
        return TableSchema(table_name=table_name, columns=self._get_columns(table_name, foreign_keys))

    def get_full_schema(self) -> List[TableSchema]:
        """Introspects every user table into a read-only snapshot."""
        table_names = self.get_table_names()
        ingestion_logger.info(f"Found {len(table_names)} tables for introspection.")

        schema_list = [self.get_table_schema(name) for name in table_names]
        if schema_list:
            ingestion_logger.debug(f"First table: {schema_list[0].model_dump()}")
        return schema_list

    def close(self) -> None:
        self.connector.dispose()
