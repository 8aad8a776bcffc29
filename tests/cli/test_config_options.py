# topmark:header:start
#
#   project      : TermFmt
#   file         : test_config_options.py
#   file_relpath : tests/cli/test_config_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: configuration discovery, ``--config``/``--no-config`` and precedence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


def test_discovered_termfmt_toml(tmp_path: Path) -> None:
    """A ``termfmt.toml`` in the working directory is picked up."""
    (tmp_path / "termfmt.toml").write_text('color = "always"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["echo", "-m", "red", "hi"])

    assert_SUCCESS(result)
    assert result.stdout == "\x1b[31mhi\x1b[0m\n"


def test_discovered_pyproject_section(tmp_path: Path) -> None:
    """``[tool.termfmt]`` in a parent directory's ``pyproject.toml`` applies."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.termfmt]\nhtml = true\ncolor = "never"\n',
        encoding="utf-8",
    )
    sub = tmp_path / "pkg"
    sub.mkdir()

    result = run_cli_in(sub, ["echo", "-m", "green", "ok"])

    assert_SUCCESS(result)
    assert result.stdout == '<font color="ForestGreen">ok</font>\n'


def test_no_config_ignores_files(tmp_path: Path) -> None:
    """``--no-config`` skips discovery."""
    (tmp_path / "termfmt.toml").write_text('color = "always"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-config", "echo", "-m", "red", "hi"])

    assert_SUCCESS(result)
    assert result.stdout == "hi\n"


def test_command_line_overrides_config(tmp_path: Path) -> None:
    """``--no-color`` wins over ``color = "always"`` in the config file."""
    config = tmp_path / "custom.toml"
    config.write_text('color = "always"\n', encoding="utf-8")

    result = run_cli(["--config", str(config), "--no-color", "echo", "-m", "red", "hi"])

    assert_SUCCESS(result)
    assert result.stdout == "hi\n"


def test_invalid_config_value(tmp_path: Path) -> None:
    """Invalid values exit with the configuration error code."""
    config = tmp_path / "bad.toml"
    config.write_text("width = 1000\n", encoding="utf-8")

    assert_CONFIG_ERROR(run_cli(["--config", str(config), "version"]))


def test_malformed_config(tmp_path: Path) -> None:
    """Unparseable TOML exits with the configuration error code."""
    config = tmp_path / "bad.toml"
    config.write_text("color = \n", encoding="utf-8")

    assert_CONFIG_ERROR(run_cli(["--config", str(config), "version"]))
