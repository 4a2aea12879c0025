"""Tests for document assembly."""

import pytest

from pretty_print import PrettyPrint, PrintConfig, StreamingPrettyPrint
from pretty_print.pretty_print import NO_MATCH_MESSAGE

EXPECTED_TREE = """Project Structure
|-- build/
|   `-- - out.js
|-- docs/
|   `-- - guide.md
|-- logs/
|   `-- - server.log
|-- src/
|   |-- .cache/
|   |   `-- - tmp.txt
|   |-- - main.py
|   `-- - util.js
|-- - .env
|-- - README.md
`-- - setup.py
"""


def test_structure_section(project):
    result = PrettyPrint(PrintConfig())
    assert result.structure_string == (
        "# File Structure\n\n" + EXPECTED_TREE + "\n---\n\n# File Contents\n\n"
    )


def test_document_starts_with_structure_then_contents(project):
    result = PrettyPrint(PrintConfig())
    assert result.document == result.structure_string + result.content_string
    assert result.content_string.startswith("==================\nPath: .env\n```env\nSECRET=1\n```\n")
    paths = [line[len("Path: "):] for line in result.content_string.splitlines() if line.startswith("Path: ")]
    assert paths == result.accepted_files


def test_single_file_target(project):
    result = PrettyPrint(PrintConfig(targets=("setup.py",)))
    assert result.document == (
        "# File Structure\n"
        "\n"
        "Project Structure\n"
        "`-- - setup.py\n"
        "\n"
        "---\n"
        "\n"
        "# File Contents\n"
        "\n"
        "==================\n"
        "Path: setup.py\n"
        "```py\n"
        "from setuptools import setup\n"
        "setup()\n"
        "```\n"
        "==================\n"
        "\n"
        "\n"
        "\n"
    )


def test_no_files_matched(project):
    result = PrettyPrint(PrintConfig(targets=("empty",)))
    assert result.document == f"# {NO_MATCH_MESSAGE}\n"


def test_no_files_matched_without_structure(project):
    result = PrettyPrint(PrintConfig(targets=("empty",), print_structure=False))
    assert result.document == f"{NO_MATCH_MESSAGE}\n"


def test_no_structure(project):
    result = PrettyPrint(PrintConfig(print_structure=False))
    assert result.structure_string == ""
    assert result.document.startswith("==================\nPath: .env\n")
    assert "# File Structure" not in result.document


def test_no_structure_wins_over_full_structure(project):
    result = PrettyPrint(PrintConfig(print_structure=False, print_full_structure=True))
    assert "Project Structure" not in result.document


def test_long_file_only_in_full_structure(project):
    default = PrettyPrint(PrintConfig())
    assert "big.py" not in default.document

    full = PrettyPrint(PrintConfig(print_full_structure=True))
    assert "|   |-- - big.py" in full.structure_string
    assert "Path: src/big.py" not in full.content_string


def test_utf8_changes_only_glyphs(project):
    ascii_result = PrettyPrint(PrintConfig())
    utf8_result = PrettyPrint(PrintConfig(use_utf8=True))
    assert utf8_result.content_string == ascii_result.content_string
    assert "📁 **Project Structure**" in utf8_result.structure_string
    assert "└── 🐍 setup.py" in utf8_result.structure_string
    assert len(utf8_result.structure_string.splitlines()) == len(ascii_result.structure_string.splitlines())


def test_idempotent(project):
    assert PrettyPrint(PrintConfig()).document == PrettyPrint(PrintConfig()).document


def test_structure_always_drawn_from_current_directory(project):
    result = PrettyPrint(PrintConfig(targets=("src",)))
    assert result.structure_string.splitlines()[2:5] == ["Project Structure", "`-- src/", "    |-- .cache/"]


class TestStreamingPrettyPrint:
    def test_streaming_matches_eager(self, project):
        streaming = StreamingPrettyPrint(PrintConfig())
        assert "".join(streaming.stream_document()) == PrettyPrint(PrintConfig()).document
        assert streaming.streaming_complete

    def test_counts(self, project):
        streaming = StreamingPrettyPrint(PrintConfig(whitelist={"py"}))
        assert streaming.file_count == 2
        assert streaming.accepted_files == ["setup.py", "src/main.py"]
        assert not streaming.streaming_complete

    def test_every_chunk_ends_with_newline_at_boundaries(self, project):
        streaming = StreamingPrettyPrint(PrintConfig())
        for line in streaming.stream_structure():
            assert line.endswith("\n")

    def test_stream_once(self, project):
        streaming = StreamingPrettyPrint(PrintConfig())
        list(streaming.stream_structure())
        list(streaming.stream_contents())
        with pytest.raises(RuntimeError, match="Structure has already been streamed"):
            list(streaming.stream_structure())
        with pytest.raises(RuntimeError, match="Contents have already been streamed"):
            list(streaming.stream_contents())
