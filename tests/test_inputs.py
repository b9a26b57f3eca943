"""Unit tests for svg_codeshot.inputs."""

from pathlib import Path

from svg_codeshot.inputs import read_input, syntax_from_path


class TestSyntaxFromPath:
    """Tests for guessing a syntax token from a file name."""

    def test_extension(self) -> None:
        assert syntax_from_path(Path("src/main.RS")) == "rs"

    def test_bare_name(self) -> None:
        assert syntax_from_path(Path("Makefile")) == "Makefile"


class TestReadInput:
    """Tests for file-or-text input handling."""

    def test_existing_file_is_read(self, tmp_path: Path) -> None:
        path = tmp_path / "hello.py"
        path.write_text("print('hi')\n", encoding="utf-8")
        document = read_input(str(path))
        assert document.text == "print('hi')\n"
        assert document.detected_syntax == "py"

    def test_language_overrides_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "script.txt"
        path.write_text("echo hi\n", encoding="utf-8")
        assert read_input(str(path), "bash").detected_syntax == "bash"

    def test_invalid_utf8_is_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"ok \xff\n")
        assert read_input(str(path)).text == "ok \ufffd\n"

    def test_literal_text(self) -> None:
        document = read_input("fn main() {}", "rs")
        assert document.text == "fn main() {}"
        assert document.detected_syntax == "rs"

    def test_literal_text_without_language(self) -> None:
        assert read_input("just words").detected_syntax is None

    def test_text_that_cannot_be_a_path(self) -> None:
        """Very long or NUL-containing strings are treated as text."""
        text = "x" * 5000 + "\x00"
        assert read_input(text).text == text
