"""Tests for the command-line interface."""

import io
import sys

import pytest

from htmlplain import __version__
from htmlplain.cli import build_config, create_parser, main


@pytest.fixture
def html_file(tmp_path):
    """Write a small HTML document to disk."""
    path = tmp_path / "page.html"
    path.write_text('<p>Hello <b>world</b></p><p><a href="http://example.com">Example</a></p>')
    return path


class TestArgumentParsing:
    """Tests for argument parsing and config building."""

    def test_defaults(self):
        """Test default arguments."""
        args = create_parser().parse_args([])
        assert args.file == "-"
        assert args.no_links is False
        assert args.parser is None
        assert args.output is None

    def test_flags_override_config_file(self, tmp_path):
        """Test that command-line flags win over the config file."""
        config_path = tmp_path / "htmlplain.yaml"
        config_path.write_text("conversion:\n  parser: html5lib\nlog_level: INFO\n")
        args = create_parser().parse_args(["--config", str(config_path), "--no-links", "-v"])

        config = build_config(args)

        assert config.conversion.show_links is False
        assert config.conversion.parser == "html5lib"
        assert config.log_level == "DEBUG"

    def test_quiet_sets_error_level(self):
        """Test the quiet flag."""
        config = build_config(create_parser().parse_args(["-q"]))
        assert config.log_level == "ERROR"

    def test_version(self, capsys):
        """Test --version output."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestConversion:
    """Tests for converting files and stdin."""

    def test_converts_file(self, html_file, capsys):
        """Test converting a file to stdout."""
        assert main([str(html_file)]) == 0
        assert capsys.readouterr().out == "Hello world\n\nExample (http://example.com)\n"

    def test_no_links(self, html_file, capsys):
        """Test disabling link annotation."""
        assert main([str(html_file), "--no-links"]) == 0
        assert capsys.readouterr().out == "Hello world\n\nExample\n"

    def test_reads_stdin(self, monkeypatch, capsys):
        """Test reading HTML from stdin."""
        stdin = io.TextIOWrapper(io.BytesIO(b"<ul><li>One</li><li>Two</li></ul>"), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)
        assert main([]) == 0
        assert capsys.readouterr().out == "* One\n* Two\n"

    def test_stdin_encoding(self, monkeypatch, capsys):
        """Test that --encoding also applies to stdin."""
        stdin = io.TextIOWrapper(io.BytesIO("<p>caf\xe9</p>".encode("latin-1")), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stdin)
        assert main(["--encoding", "latin-1"]) == 0
        assert capsys.readouterr().out == "caf\xe9\n"

    def test_writes_output_file(self, html_file, tmp_path, capsys):
        """Test writing to --output."""
        output = tmp_path / "page.txt"
        assert main([str(html_file), "-o", str(output)]) == 0
        assert output.read_text() == "Hello world\n\nExample (http://example.com)\n"
        assert capsys.readouterr().out == ""

    def test_config_file(self, html_file, tmp_path, capsys):
        """Test settings loaded from a YAML file."""
        config_path = tmp_path / "htmlplain.yaml"
        config_path.write_text("conversion:\n  show_links: false\n")
        assert main([str(html_file), "--config", str(config_path)]) == 0
        assert capsys.readouterr().out == "Hello world\n\nExample\n"

    def test_document_without_body(self, tmp_path, capsys):
        """Test that a document without body writes nothing."""
        path = tmp_path / "fragment.html"
        path.write_text("<p>fragment</p>")
        assert main([str(path), "--parser", "html.parser"]) == 0
        assert capsys.readouterr().out == ""


class TestErrors:
    """Tests for error reporting."""

    def test_missing_file(self, tmp_path, capsys):
        """Test that an unreadable input file fails cleanly."""
        assert main([str(tmp_path / "missing.html")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, capsys):
        """Test that an invalid config file fails cleanly."""
        config_path = tmp_path / "htmlplain.yaml"
        config_path.write_text("conversion:\n  parser: regex\n")
        assert main(["--config", str(config_path)]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        """Test that a missing config file fails cleanly."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
        assert "Could not read config file" in capsys.readouterr().err

    def test_unknown_encoding(self, html_file, capsys):
        """Test that an unknown input encoding fails cleanly."""
        assert main([str(html_file), "--encoding", "no-such-codec"]) == 1
        assert "Error" in capsys.readouterr().err
