"""Tests for shared utility helpers."""

from learnflow.utils import contains_pattern, humanize_filename


class TestContainsPattern:
    def test_plain_text(self) -> None:
        assert contains_pattern("Hadoop") == "%hadoop%"

    def test_wildcards_escaped(self) -> None:
        assert contains_pattern("50%_off") == "%50\\%\\_off%"

    def test_escape_character_escaped(self) -> None:
        assert contains_pattern("a\\b") == "%a\\\\b%"


def test_humanize_filename() -> None:
    assert humanize_filename("operating-systems_unit_1.pdf") == "operating systems unit 1"
