"""Runs the installed command line end to end as a subprocess."""


def test_cli_generates_go_file(run_cli_tool, fixtures_dir, expected_dir, tmp_path):
    output = tmp_path / "out" / "enums.go"

    result = run_cli_tool(fixtures_dir / "schema.sql", output, pkg="models")

    assert result.returncode == 0, result.stderr
    assert output.read_text() == (expected_dir / "schema_enums.go").read_text()


def test_cli_fails_on_empty_value(run_cli_tool, fixtures_dir, tmp_path):
    output = tmp_path / "enums.go"

    result = run_cli_tool(fixtures_dir / "trailing_comma.sql", output, pkg="models")

    assert result.returncode == 1
    assert "empty identifier" in result.stderr
    assert not output.exists()


def test_cli_strict_drops_empty_value(run_cli_tool, fixtures_dir, tmp_path):
    output = tmp_path / "enums.go"

    result = run_cli_tool(fixtures_dir / "trailing_comma.sql", output, pkg="models", strict=True)

    assert result.returncode == 0, result.stderr
    assert "MoodHappy Mood = \"happy\"" in output.read_text()
