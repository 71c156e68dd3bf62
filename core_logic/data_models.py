# SqliteTypes/core_logic/data_models.py
from pydantic import BaseModel, Field
from typing import List, Optional

class ForeignKey(BaseModel):
    """A single-column foreign key as reported by PRAGMA foreign_key_list."""
    source_column: str
    target_table: str
    target_column: Optional[str] = None  # None when the reference names no column (implicit primary key)

class ColumnSchema(BaseModel):
    """Defines metadata for a single table column."""
    name: str = Field(description="The exact column name (e.g., first_name).")
    data_type: str = Field(description="The declared SQL type as stored in the catalog (e.g., text, integer).")
    not_null: bool = Field(default=False, description="True when the column carries a NOT NULL constraint.")
    primary_key: bool = False
    foreign_key: Optional[ForeignKey] = None

class TableSchema(BaseModel):
    """One user table, columns in catalog order."""
    table_name: str
    columns: List[ColumnSchema]

class TypeField(BaseModel):
    name: str
    type_name: str
    optional: bool = False

class TypeDeclaration(BaseModel):
    """A named object type in the generated declaration file."""
    name: str
    fields: List[TypeField] = Field(default_factory=list)
