# SqliteTypes/core_logic/output_writer.py
import logging

from core_logic.errors import FileWriteError

output_logger = logging.getLogger('SqliteTypes.Output')


def write_output(output_path: str, content: str) -> None:
    """Writes the declaration file as UTF-8, replacing any existing file."""
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise FileWriteError(f"Could not write output file '{output_path}': {e}") from e
    output_logger.info(f"Wrote {len(content)} characters to '{output_path}'.")
