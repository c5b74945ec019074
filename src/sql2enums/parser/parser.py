# ===== SECTION: IMPORTS =====
import io
import logging
from pathlib import Path
from typing import Iterator, List, TextIO, Union

from ..errors import SQLReadError
from ..sql_models import EnumDeclaration, ScannerOptions
from .enum_parser import extract
from .scanner import scan


# ===== SECTION: FUNCTIONS =====


def parse_enums(stream: TextIO, options: ScannerOptions = None, name: str = None) -> Iterator[EnumDeclaration]:
    """
    Yield the enum declarations found in a SQL text stream, in source order.

    Statements that are not enum declarations are skipped silently.

    Args:
        stream (TextIO): SQL text stream
        options (ScannerOptions, optional): Strictness options for scanning and extraction
        name (str, optional): Stream name used in error messages

    Raises:
        SQLReadError: If the stream cannot be read
    """
    options = options or ScannerOptions()
    for block in scan(stream, options, name):
        declaration = extract(block, options)
        if declaration is not None:
            yield declaration


def parse_sql(sql_content: str, options: ScannerOptions = None) -> List[EnumDeclaration]:
    """Parse enum declarations from SQL held in a string."""
    return list(parse_enums(io.StringIO(sql_content), options))


def parse_sql_file(sql_file: Union[str, Path], options: ScannerOptions = None) -> List[EnumDeclaration]:
    """
    Parse enum declarations from a UTF-8 SQL file.

    Raises:
        SQLReadError: If the file cannot be opened or read
    """
    sql_file = Path(sql_file)
    try:
        handle = sql_file.open(encoding="utf-8")
    except OSError as e:
        raise SQLReadError("open", e, str(sql_file)) from e

    with handle:
        declarations = list(parse_enums(handle, options, str(sql_file)))

    logging.debug(f"Parsed {len(declarations)} ENUM type(s) from {sql_file}")
    return declarations
