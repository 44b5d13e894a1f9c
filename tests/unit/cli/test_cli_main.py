"""Unit tests for the codediff command-line entry point."""

import argparse
import io
import json

import pytest

from codediff.cli import EXIT_DIFFERENCES, EXIT_ERROR, EXIT_SUCCESS, _validate_context_lines, create_parser, main


@pytest.fixture
def files(tmp_path, monkeypatch, write_file):
    """Write an original/modified pair and run from an empty directory."""
    monkeypatch.chdir(tmp_path)
    left = write_file("old.txt", "a\nb\nc\n")
    right = write_file("new.txt", "a\nx\nc\n")
    return str(left), str(right)


@pytest.mark.unit
@pytest.mark.cli
class TestValidateContextLines:
    """Test _validate_context_lines() helper function."""

    def test_valid_values(self):
        """Test valid non-negative integers."""
        assert _validate_context_lines("0") == 0
        assert _validate_context_lines("7") == 7

    def test_invalid_negative_integer(self):
        """Test rejection of negative integer."""
        with pytest.raises(argparse.ArgumentTypeError, match="non-negative"):
            _validate_context_lines("-1")

    def test_invalid_non_integer(self):
        """Test rejection of non-integer value."""
        with pytest.raises(argparse.ArgumentTypeError, match="must be an integer"):
            _validate_context_lines("3.5")


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Test create_parser() function."""

    def test_defaults(self):
        """Test parser defaults."""
        args = create_parser().parse_args(["a", "b"])
        assert args.format == "unified"
        assert args.view == "inline"
        assert args.color == "auto"
        assert args.context is None
        assert args.structured is False

    def test_structured_aliases(self):
        """Test --json and --structured set the same flag."""
        parser = create_parser()
        assert parser.parse_args(["a", "b", "--json"]).structured
        assert parser.parse_args(["a", "b", "--structured"]).structured

    def test_requires_two_inputs(self):
        """Test parser requires both inputs."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["only-one"])


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test main() end to end."""

    def test_identical_files_exit_zero(self, tmp_path, monkeypatch, write_file, capsys):
        """Test identical inputs exit 0 and report no differences."""
        monkeypatch.chdir(tmp_path)
        path = str(write_file("same.txt", "one\ntwo"))

        assert main([path, path]) == EXIT_SUCCESS

        captured = capsys.readouterr()
        assert captured.out == "  one\n  two\n"
        assert "No differences found." in captured.err

    def test_differences_exit_one(self, files, capsys):
        """Test differing inputs exit 1 and print the unified form."""
        assert main([*files, "--color", "never"]) == EXIT_DIFFERENCES

        captured = capsys.readouterr()
        assert captured.out == "  a\n- b\n+ x\n  c\n  \n"
        assert "+0 -0 ~1" in captured.err

    def test_color_always(self, files, capsys):
        """Test forced colors add ANSI codes."""
        main([*files, "--color", "always"])
        assert "\033[31m- b\033[0m" in capsys.readouterr().out

    def test_color_auto_not_tty(self, files, capsys):
        """Test auto mode leaves captured output uncolored."""
        main(list(files))
        assert "\033[" not in capsys.readouterr().out

    def test_missing_file(self, files, capsys):
        """Test a missing input exits 2."""
        assert main([files[0], "does-not-exist.txt"]) == EXIT_ERROR
        assert "Error: File not found: does-not-exist.txt" in capsys.readouterr().err

    def test_malformed_json(self, tmp_path, monkeypatch, write_file, capsys):
        """Test malformed structured input exits 2 naming the side."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.json", '{"a": 1}'))
        right = str(write_file("b.json", '{"a": }'))

        assert main([left, right, "--json"]) == EXIT_ERROR
        assert "Error: Right pane: Invalid JSON:" in capsys.readouterr().err

    def test_deeply_nested_json(self, tmp_path, monkeypatch, write_file, capsys):
        """Test JSON nested too deeply exits 2 instead of crashing."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("deep.json", "[" * 100_000 + "]" * 100_000))
        right = str(write_file("flat.json", "[]"))

        assert main([left, right, "--json"]) == EXIT_ERROR
        assert "Error: Left pane: Invalid JSON: Document nested too deeply" in capsys.readouterr().err

    def test_structured_formatting_only(self, tmp_path, monkeypatch, write_file):
        """Test JSON differing only in layout exits 0 in structured mode."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.json", '{"a":1,"b":[1,2]}'))
        right = str(write_file("b.json", '{\n  "a": 1,\n  "b": [1, 2]\n}\n'))

        assert main([left, right]) == EXIT_DIFFERENCES
        assert main([left, right, "--structured"]) == EXIT_SUCCESS

    def test_sort_keys(self, tmp_path, monkeypatch, write_file):
        """Test key order is ignored with --sort-keys."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.json", '{"a":1,"b":2}'))
        right = str(write_file("b.json", '{"b":2,"a":1}'))

        assert main([left, right, "--json"]) == EXIT_DIFFERENCES
        assert main([left, right, "--json", "--sort-keys"]) == EXIT_SUCCESS

    def test_ignore_whitespace(self, tmp_path, monkeypatch, write_file):
        """Test -w makes whitespace-only changes equal."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.txt", "x  =  1\n"))
        right = str(write_file("b.txt", "x = 1\n"))

        assert main([left, right]) == EXIT_DIFFERENCES
        assert main([left, right, "-w"]) == EXIT_SUCCESS

    def test_stdin_input(self, files, monkeypatch, capsys):
        """Test one side may come from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
        assert main(["-", files[0]]) == EXIT_SUCCESS

    def test_both_stdin_rejected(self, files, capsys):
        """Test both sides cannot read stdin."""
        assert main(["-", "-"]) == EXIT_ERROR
        assert "Cannot read both" in capsys.readouterr().err

    def test_json_format(self, files, capsys):
        """Test JSON output is parseable and complete."""
        main([*files, "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["stats"] == {"added": 0, "removed": 0, "changed": 1}
        assert data["options"]["view_mode"] == "inline"

    def test_html_side_by_side(self, files, capsys):
        """Test HTML output honours the view flag."""
        main([*files, "--format", "html", "--view", "side-by-side"])
        out = capsys.readouterr().out
        assert out.startswith('<table class="diff-table"')
        assert '<span class="word-added">x</span>' in out

    def test_html_standalone(self, files, capsys):
        """Test --standalone emits a complete page."""
        main([*files, "--format", "html", "--standalone"])
        assert capsys.readouterr().out.startswith("<!DOCTYPE html>")

    def test_context_collapses_html(self, tmp_path, monkeypatch, write_file, capsys):
        """Test --context controls how much unchanged text stays visible."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.txt", "\n".join(str(i) for i in range(20))))
        right = str(write_file("b.txt", "\n".join(str(i) for i in range(19)) + "\nlast"))

        main([left, right, "--format", "html", "--context", "2"])

        assert "17 unchanged lines" in capsys.readouterr().out

    def test_context_collapses_unified(self, tmp_path, monkeypatch, write_file, capsys):
        """Test --context collapses distant lines in terminal output."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.txt", "\n".join(str(i) for i in range(10))))
        right = str(write_file("b.txt", "\n".join(str(i) for i in range(9)) + "\nlast"))

        main([left, right, "--color", "never", "--context", "1"])

        assert capsys.readouterr().out == "@@ 8 unchanged lines @@\n  8\n- 9\n+ last\n"

    def test_unified_keeps_every_line_by_default(self, tmp_path, monkeypatch, write_file, capsys):
        """Test terminal output is the full export form without --context."""
        monkeypatch.chdir(tmp_path)
        left = str(write_file("a.txt", "\n".join(str(i) for i in range(10))))
        right = str(write_file("b.txt", "\n".join(str(i) for i in range(9)) + "\nlast"))

        main([left, right, "--color", "never"])

        out = capsys.readouterr().out
        assert "@@" not in out
        assert out.startswith("  0\n  1\n")

    def test_invalid_context(self, files, capsys):
        """Test a negative context is a usage error."""
        assert main([*files, "--context", "-3"]) == EXIT_ERROR

    def test_output_file(self, files, tmp_path, capsys):
        """Test --output writes the rendering to a file."""
        target = tmp_path / "out" / "result.diff"

        assert main([*files, "--output", str(target)]) == EXIT_DIFFERENCES

        assert target.read_text(encoding="utf-8") == "  a\n- b\n+ x\n  c\n  \n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Diff written to" in captured.err

    def test_output_directory(self, files, tmp_path):
        """Test a directory target receives a timestamped export."""
        export_dir = tmp_path / "exports"
        export_dir.mkdir()

        main([*files, "-o", str(export_dir)])

        (exported,) = export_dir.iterdir()
        assert exported.name.startswith("codediff-")
        assert exported.suffix == ".diff"

    def test_version(self, capsys):
        """Test --version prints the version and exits 0."""
        assert main(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("codediff ")

    def test_log_level_debug(self, files, capsys):
        """Test debug logging reaches stderr."""
        main([*files, "--log-level", "DEBUG"])
        assert "DEBUG: Aligned" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainConfiguration:
    """Test configuration files and environment defaults in main()."""

    def test_config_file_sets_defaults(self, files, write_file, capsys):
        """Test a config file changes the output format."""
        config = write_file("settings.toml", 'format = "json"\n')

        main([*files, "--config", str(config)])

        assert json.loads(capsys.readouterr().out)["type"] == "codediff"

    def test_flags_override_config(self, files, write_file, capsys):
        """Test explicit flags win over configuration."""
        config = write_file("settings.yaml", "format: json\n")

        main([*files, "--config", str(config), "--format", "unified", "--color", "never"])

        assert capsys.readouterr().out.startswith("  a\n")

    def test_discovered_dotfile(self, files, write_file):
        """Test a dotfile in the working directory is picked up."""
        write_file(".codediff.json", '{"ignore-whitespace": true}')
        left = str(write_file("ws-left.txt", "a  b"))
        right = str(write_file("ws-right.txt", "a b"))

        assert main([left, right]) == EXIT_SUCCESS

    def test_environment_variable(self, files, write_file, monkeypatch):
        """Test CODEDIFF_* variables set defaults."""
        monkeypatch.setenv("CODEDIFF_IGNORE_WHITESPACE", "true")
        left = str(write_file("ws-left.txt", "a  b"))
        right = str(write_file("ws-right.txt", "a b"))

        assert main([left, right]) == EXIT_SUCCESS

    def test_invalid_config_file(self, files, write_file, capsys):
        """Test an unreadable config exits 2."""
        config = write_file("broken.toml", "format = \n")

        assert main([*files, "--config", str(config)]) == EXIT_ERROR
        assert "Invalid config file" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainRich:
    """Test --rich output."""

    def test_rich_table(self, files, capsys):
        """Test Rich draws a table and summary panel."""
        pytest.importorskip("rich")

        assert main([*files, "--rich"]) == EXIT_DIFFERENCES

        out = capsys.readouterr().out
        assert "Summary" in out
        assert "~1 changed" in out
