"""
Tests for loadingbar/main.py — the click CLI.
"""

from click.testing import CliRunner

from loadingbar.main import cli

LE = "\x1b[1F"


def _run(*args):
    result = CliRunner().invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestSingleBar:
    def test_fixed_width(self):
        assert _run("0.5", "--width", "14") == "⟳ [█████▒▒▒▒▒]" + LE + "\n"

    def test_rtl_flag(self):
        assert _run("1.0", "--width", "5", "--rtl") == "[100%]✓ " + LE + "\n"

    def test_ltr_flag_overrides_config(self, isolated_config):
        isolated_config.write_text("rtl = true\n")
        assert _run("1.0", "--width", "5", "--ltr") == "✓ [100%]" + LE + "\n"

    def test_width_from_config(self, isolated_config):
        isolated_config.write_text("width = 5\n")
        assert _run("0.8") == "⟳ [80%]" + LE + "\n"

    def test_no_terminal_uses_80_columns(self):
        out = _run("0.0")
        assert out == "⟳ [" + "▒" * 76 + "]" + LE + "\n"

    def test_styled_has_no_line_end(self):
        out = _run("0.8", "--width", "5", "--styled")
        assert "[80%]" in out
        assert LE not in out

    def test_negative_width_rejected(self):
        result = CliRunner().invoke(cli, ["0.5", "--width", "-1"])
        assert result.exit_code == 2


class TestDemo:
    def test_demo_reaches_complete(self):
        out = _run("--demo", "--steps", "4", "--delay", "0", "--width", "8")
        frames = [line for line in out.split("\n") if line]
        assert frames == [
            "⟳ [▒▒▒▒]" + LE,
            "⟳ [█▒▒▒]" + LE,
            "⟳ [██▒▒]" + LE,
            "⟳ [███▒]" + LE,
            "✓ [████]" + LE,
        ]

    def test_version(self):
        assert "loadingbar" in _run("--version")
