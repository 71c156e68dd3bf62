# SqliteTypes/core_logic/type_synthesis.py
from enum import Enum
from typing import Dict, List, Set
import logging

from config.settings import AGGREGATE_TYPE_NAME, BLOB_TS_TYPE, INT64_TS_TYPE
from core_logic.data_models import ColumnSchema, TableSchema, TypeDeclaration, TypeField
from core_logic.errors import UnknownColumnTypeError

synthesis_logger = logging.getLogger('SqliteTypes.Synthesis')


class ColumnType(str, Enum):
    """The declared SQL types the generator understands."""
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BLOB = "blob"


TS_TYPES: Dict[ColumnType, str] = {
    ColumnType.TEXT: "string",
    ColumnType.INTEGER: INT64_TS_TYPE,
    ColumnType.FLOAT: "number",
    ColumnType.BLOB: BLOB_TS_TYPE,
}


def sql_type_to_ts_type(sql_type: str) -> str:
    """
    Maps a declared SQL type to its TypeScript type.
    SQLite type names are case-insensitive, so `TEXT` and `text` are equal.
    """
    try:
        column_type = ColumnType(sql_type.strip().lower())
    except ValueError:
        raise UnknownColumnTypeError(sql_type) from None
    return TS_TYPES[column_type]


def column_to_field(column: ColumnSchema) -> TypeField:
    """
    A foreign key column is typed as the referenced table, never by its own
    SQL type. Columns without NOT NULL become optional fields.
    """
    if column.foreign_key:
        type_name = column.foreign_key.target_table
    else:
        type_name = sql_type_to_ts_type(column.data_type)
    return TypeField(name=column.name, type_name=type_name, optional=not column.not_null)


def table_to_declaration(table: TableSchema) -> TypeDeclaration:
    fields = []
    for column in table.columns:
        try:
            fields.append(column_to_field(column))
        except UnknownColumnTypeError as e:
            raise UnknownColumnTypeError(e.sql_type, table.table_name, column.name) from None
    return TypeDeclaration(name=table.table_name, fields=fields)


def tables_to_aggregate(tables: List[TableSchema], name: str = AGGREGATE_TYPE_NAME) -> TypeDeclaration:
    """One field per table, named after the table and typed as it."""
    return TypeDeclaration(
        name=name,
        fields=[TypeField(name=t.table_name, type_name=t.table_name) for t in tables],
    )


def render_field(field: TypeField) -> str:
    return f"{field.name}{'?' if field.optional else ''}: {field.type_name}"


def render_declaration(declaration: TypeDeclaration) -> str:
    """`type <name> = { a: b; c?: d };` on a single line."""
    if not declaration.fields:
        return f"type {declaration.name} = {{}};"
    members = "; ".join(render_field(f) for f in declaration.fields)
    return f"type {declaration.name} = {{ {members} }};"


def _warn_dangling_references(tables: List[TableSchema]) -> None:
    known: Set[str] = {t.table_name for t in tables}
    for table in tables:
        for column in table.columns:
            fk = column.foreign_key
            if fk and fk.target_table not in known:
                synthesis_logger.warning(
                    f"{table.table_name}.{column.name} references unknown table '{fk.target_table}'."
                )


def build_declarations(tables: List[TableSchema]) -> List[TypeDeclaration]:
    """Table declarations in discovery order, followed by the aggregate."""
    _warn_dangling_references(tables)
    declarations = [table_to_declaration(t) for t in tables]
    declarations.append(tables_to_aggregate(tables))
    return declarations


def generate_source(tables: List[TableSchema]) -> str:
    declarations = build_declarations(tables)
    synthesis_logger.info(f"Synthesized {len(declarations)} type declarations.")
    return "\n\n".join(render_declaration(d) for d in declarations)
