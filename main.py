# SqliteTypes/main.py
import logging
import sys
from typing import List, Optional

from config.settings import LOG_LEVEL, PRINT_WIDTH, TAB_WIDTH
from core_logic.arguments import resolve_arguments
from core_logic.data_models import TableSchema
from core_logic.errors import TypeGenerationError
from core_logic.formatter import format_typescript
from core_logic.output_writer import write_output
from core_logic.type_synthesis import generate_source
from ingestion.introspection import SQLiteIntrospectionModule

# Configure basic logging to see the flow
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
main_logger = logging.getLogger('SqliteTypes.Main')


# --- 1. Schema Introspection ---
def read_schema(db_path: str) -> List[TableSchema]:
    """Applies the demo schema, then snapshots every user table."""
    introspector = SQLiteIntrospectionModule(db_path)
    try:
        introspector.initialize_schema()
        return introspector.get_full_schema()
    finally:
        introspector.close()


# --- 2. Synthesis + Formatting ---
def generate_declarations(db_path: str) -> str:
    tables = read_schema(db_path)
    source = generate_source(tables)
    return format_typescript(source, print_width=PRINT_WIDTH, tab_width=TAB_WIDTH)


# --- 3. Full Run ---
def run(argv: List[str]) -> None:
    """
    Resolves arguments and runs the whole pipeline. The output file is only
    touched once every earlier stage has succeeded.
    """
    args = resolve_arguments(argv)
    main_logger.info(f"--- Generating types for '{args.db_path}' ---")

    output = generate_declarations(args.db_path)
    write_output(args.output_path, output)

    main_logger.info("--- Done. ---")


def cli(argv: Optional[List[str]] = None) -> int:
    try:
        run(sys.argv[1:] if argv is None else argv)
    except TypeGenerationError as e:
        main_logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(cli())
