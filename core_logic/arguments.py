# SqliteTypes/core_logic/arguments.py
from typing import List, Optional
from pydantic import BaseModel

from core_logic.errors import MissingArgumentError


class GeneratorArguments(BaseModel):
    db_path: str
    output_path: str


def find_argument(args: List[str], flag: str) -> Optional[str]:
    """
    Returns the value of the first `--<flag>=VALUE` argument, or None.
    Plain prefix match: no quoting, and an empty VALUE does not count.
    """
    prefix = f"--{flag}="
    for arg in args:
        if arg.startswith(prefix) and len(arg) > len(prefix):
            return arg[len(prefix):]
    return None


def resolve_arguments(args: List[str]) -> GeneratorArguments:
    """Extracts the database and output paths. Both are required."""
    db_path = find_argument(args, "db")
    output_path = find_argument(args, "output")

    if not db_path:
        raise MissingArgumentError(
            "You did not specify a database path. E.g. --db=/path/to/database.db"
        )
    if not output_path:
        raise MissingArgumentError(
            "You did not specify an output path. E.g. --output=/path/to/output.d.ts"
        )

    return GeneratorArguments(db_path=db_path, output_path=output_path)
