import pytest
from pathlib import Path
import subprocess
import sys

# Define paths relative to the main tests/ directory
TESTS_ROOT_DIR = Path(__file__).parent.parent
FIXTURES_DIR = TESTS_ROOT_DIR / "fixtures"
EXPECTED_DIR = TESTS_ROOT_DIR / "expected"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def expected_dir() -> Path:
    return EXPECTED_DIR


@pytest.fixture
def run_cli_tool():
    """Fixture to provide a helper function for running the CLI tool."""
    def _run_cli(sql_file: Path, output_file: Path, pkg: str = None, lang: str = None, strict: bool = False, verbose: bool = False):
        """Helper function to run the CLI tool as a subprocess."""
        cmd = [
            sys.executable,
            "-m",
            "sql2enums.cli",
            str(sql_file),
            str(output_file),
        ]
        if pkg:
            cmd.extend(["--pkg", pkg])
        if lang:
            cmd.extend(["--lang", lang])
        if strict:
            cmd.append("--strict")
        if verbose:
            cmd.append("-v")

        return subprocess.run(cmd, capture_output=True, text=True, check=False)

    return _run_cli
