# ===== SECTION: IMPORTS =====
import logging
from typing import Optional

from ..constants import ENUM_STATEMENT_REGEX
from ..sql_models import EnumDeclaration, ScannerOptions
from .utils import normalize_identifier, unquote_sql_literal


# ===== SECTION: FUNCTIONS =====


def extract(block: str, options: ScannerOptions = None) -> Optional[EnumDeclaration]:
    """
    Extract an enum declaration from one raw CREATE TYPE statement.

    Args:
        block (str): Statement text as produced by the scanner
        options (ScannerOptions, optional): In strict mode empty values are dropped

    Returns:
        Optional[EnumDeclaration]: The declaration, or None when the statement
        is not a `CREATE TYPE <name> AS ENUM (...);` statement (composite
        types, malformed value lists). A non-match is not an error.
    """
    options = options or ScannerOptions()

    match = ENUM_STATEMENT_REGEX.search(block)
    if match is None:
        logging.debug(f"Statement is not an ENUM type, skipping: {block!r}")
        return None

    sql_name = match.group(1)
    pieces = match.group(2).split(",")

    values = [normalize_identifier(piece) for piece in pieces]
    sql_values = [unquote_sql_literal(piece) for piece in pieces]

    if options.strict:
        kept = [(value, literal) for value, literal in zip(values, sql_values) if value]
        if not kept:
            logging.debug(f"ENUM type '{sql_name}' has no usable values, skipping")
            return None
        values = [value for value, _ in kept]
        sql_values = [literal for _, literal in kept]

    declaration = EnumDeclaration(
        type_name=normalize_identifier(sql_name),
        values=tuple(values),
        sql_name=sql_name,
        sql_values=tuple(sql_values),
    )
    logging.debug(f"Parsed ENUM type '{sql_name}' with values: {list(declaration.values)}")
    return declaration
