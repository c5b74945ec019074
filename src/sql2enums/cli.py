import typer
from pathlib import Path
import logging
from typing import Optional

from .constants import DEFAULT_LANGUAGE
from .errors import CodeGenerationError, SQL2EnumsError, SQLReadError
from .generator import generate_code, get_renderer
from .parser import parse_sql_file
from .sql_models import ScannerOptions

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

app = typer.Typer()


@app.command()
def main(
    sql_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the input .sql schema file containing CREATE TYPE ... AS ENUM statements.",
    ),
    output_file: Path = typer.Argument(
        ...,
        file_okay=True,
        dir_okay=False,
        writable=True,
        help="Path for the generated output file.",
    ),
    pkg: Optional[str] = typer.Option(
        None,
        "--pkg",
        "-p",
        help="Package name for the generated file (required for Go output).",
    ),
    lang: str = typer.Option(
        DEFAULT_LANGUAGE,
        "--lang",
        "-l",
        help="Target language of the generated code: 'go' or 'python'.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Require '--' for line comments, nest block comments and drop empty enum values.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
):
    """Generates typed enum definitions from PostgreSQL CREATE TYPE ... AS ENUM statements."""
    # Force=True is needed because basicConfig was already called at the module level
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s", force=True)

    try:
        renderer = get_renderer(lang, pkg or "")
    except SQL2EnumsError as e:
        logging.error(f"Invalid options: {e}")
        raise typer.Exit(code=1)

    options = ScannerOptions(strict=strict)
    logging.info(f"Reading schema SQL from: {sql_file}")
    logging.info(f"Writing {renderer.language} code to: {output_file}")

    try:
        declarations = parse_sql_file(sql_file, options)
    except SQLReadError as e:
        logging.error(f"Failed to read SQL file: {e}")
        raise typer.Exit(code=1)

    logging.info(f"Found {len(declarations)} ENUM type(s)")

    try:
        code = generate_code(declarations, renderer)
    except CodeGenerationError as e:
        logging.error(f"Failed to generate code: {e}")
        raise typer.Exit(code=1)

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(code, encoding="utf-8")
        logging.info(f"Successfully generated {renderer.language} code to {output_file}")
    except OSError as e:
        logging.error(f"Failed to write output file: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
