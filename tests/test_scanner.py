"""Block-length scanner tests."""

import pytest

from pyspanscan import block_length

BRACE = (ord("{"), ord("}"))
BRACKET = (ord("["), ord("]"))


class TestBlockLength:
    @pytest.mark.parametrize(
        "text, delims, expected",
        [
            (b"{}", BRACE, 2),
            (b"[]", BRACKET, 2),
            (b'{"a":1}', BRACE, 7),
            (b'{"a":{"b":{}}}', BRACE, 14),
            (b"[1,[2,[3]],4]", BRACKET, 13),
        ],
    )
    def test_balanced(self, text, delims, expected):
        assert block_length(text, 0, len(text), *delims) == expected

    def test_stops_at_matching_close(self):
        text = b'{"a":1},{"b":2}'
        assert block_length(text, 0, len(text), *BRACE) == 7

    def test_other_delimiters_ignored(self):
        text = b"[{]}"
        assert block_length(text, 0, len(text), *BRACKET) == 3

    def test_starts_mid_buffer(self):
        text = b'xx{"a":[1]}yy'
        assert block_length(text, 2, len(text), *BRACE) == 9

    def test_unbalanced_runs_to_end(self):
        text = b'{"a":{"b":1}'
        assert block_length(text, 0, len(text), *BRACE) == len(text)

    def test_unbalanced_same_as_closing_on_last_byte(self):
        balanced = b"{{}}"
        unbalanced = b"{{}x"
        assert block_length(balanced, 0, 4, *BRACE) == block_length(unbalanced, 0, 4, *BRACE)

    def test_end_bounds_the_scan(self):
        text = b"{{}}"
        assert block_length(text, 0, 3, *BRACE) == 3

    def test_lone_opener(self):
        assert block_length(b"{", 0, 1, *BRACE) == 1
