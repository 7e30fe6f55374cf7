"""
Tests for release metadata extraction.
"""
import pytest

from core.exceptions import InvalidOperationError
from core.models import ReleaseRecord
from core.release import extractor
from core.release.extractor import (
    extract_generic,
    extract_metadata,
    extract_read,
    get_extractor,
    register_extractor,
)
from core.release.selector import iter_tool_parts


@pytest.fixture
def single_part(conversation, tool_part):
    """Build one tool part model from tool_part arguments."""

    def factory(*args, **kwargs):
        messages = conversation([tool_part(*args, **kwargs)])
        return next(iter_tool_parts(messages))[1]

    return factory


class TestExtractRead:
    """Tests for the read tool extractor."""

    def test_end_of_file_marker(self):
        output = "<file>\n00001| line\n</file>\n\n(End of file - total 150 lines)"

        record = extract_read(output, "src/app.py")

        assert record.lines == 150
        assert record.path == "src/app.py"
        assert record.size == len(output.encode("utf-8"))

    def test_first_marker_wins(self):
        """Test only the first end-of-file marker is used."""
        output = (
            "(End of file - total 100 lines)\n"
            "some text\n"
            "(End of file - total 200 lines)"
        )

        assert extract_read(output, "a.txt").lines == 100

    def test_file_block_line_count(self):
        """Test lines are counted inside the file block without a marker."""
        output = "<file>\nfirst\nsecond\nthird\n</file>"

        assert extract_read(output, "a.txt").lines == 3

    def test_no_line_information(self):
        """Test line count stays unset when nothing matches."""
        output = "Some random read output without line info"

        record = extract_read(output, "a.txt")

        assert record.lines is None
        assert record.size > 0

    def test_malformed_marker(self):
        output = "(End of file - total abc lines)"

        assert extract_read(output, "a.txt").lines is None

    def test_marker_needs_ascii_digits(self):
        """Test non-ASCII digits in the marker are not read as a line count."""
        output = "(End of file - total \u0661\u0662 lines)"

        assert extract_read(output, "a.txt").lines is None

    def test_empty_output(self):
        record = extract_read("", "empty.txt")

        assert record.lines is None
        assert record.size == 0


class TestExtractGeneric:
    """Tests for the fallback extractor."""

    def test_byte_size_not_character_count(self):
        """Test multi-byte characters count by their UTF-8 size."""
        output = "🎉" * 10

        record = extract_generic(output, "party")

        assert record.size == 40
        assert record.size > len(output)
        assert record.lines is None

    def test_generic_ignores_line_markers(self):
        """Test non-read tools never get a line count."""
        record = extract_generic("(End of file - total 5 lines)", "bash")

        assert record.lines is None


class TestExtractMetadata:
    """Tests for extractor dispatch."""

    def test_read_dispatch(self, single_part):
        part = single_part(
            "call_1", tool="read", output="x\n(End of file - total 50 lines)", title="a.py"
        )

        record = extract_metadata(part)

        assert record.lines == 50
        assert record.path == "a.py"

    def test_bash_output(self, single_part):
        part = single_part("call_1", tool="bash", output="Installing...\nDone!")

        record = extract_metadata(part)

        assert record.lines is None
        assert record.size == 19
        assert record.path == "bash call_1"

    def test_missing_title(self, single_part):
        """Test a completed call without a title is reported as Unknown."""
        part = single_part("call_1", title=None)

        assert extract_metadata(part).path == "Unknown"

    def test_empty_title(self, single_part):
        part = single_part("call_1", title="")

        assert extract_metadata(part).path == "Unknown"

    def test_unknown_tool_uses_generic(self):
        assert get_extractor("unknown_tool") is extract_generic
        assert get_extractor("read") is extract_read

    def test_non_completed_part(self, single_part):
        part = single_part("call_1", status="running")

        with pytest.raises(InvalidOperationError):
            extract_metadata(part)

    def test_register_extractor(self, single_part, monkeypatch):
        """Test new tools can register an extractor without touching the fallback."""
        monkeypatch.setattr(extractor, "_extractors", dict(extractor._extractors))

        @register_extractor("grep")
        def extract_grep(output: str, title: str) -> ReleaseRecord:
            return ReleaseRecord(path=f"grep: {title}", size=len(output), lines=output.count("\n") + 1)

        part = single_part("call_1", tool="grep", output="a:1\nb:2", title="pattern")

        record = extract_metadata(part)

        assert record.path == "grep: pattern"
        assert record.lines == 2
        assert get_extractor("bash") is extract_generic
