"""CLI smoke tests."""

from click.testing import CliRunner
from postman_suite_runner.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for option in (
        "--environment",
        "--collection",
        "--folder",
        "--reporters",
        "--bail",
        "--timeout",
    ):
        assert option in result.output
    assert "cli,htmlextra,junit" in result.output


def test_short_help_flag_exits_without_touching_files(tmp_path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h", "--assets-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert not (tmp_path / "reports").exists()
