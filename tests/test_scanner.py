import pytest

from raycube.errors import FileCheckError
from raycube.scanner import is_map_char, is_whitespace, parse_color, scan_lines

HEADER = [
    "NO ./n.png\n",
    "SO ./s.png\n",
    "WE ./w.png\n",
    "EA ./e.png\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP = ["1111\n", "1N01\n", "1111\n"]
VALID = HEADER + MAP


def code_of(lines):
    with pytest.raises(FileCheckError) as info:
        scan_lines(lines)
    return info.value.code


def test_is_whitespace():
    assert is_whitespace(" ")
    assert is_whitespace("\t")
    assert is_whitespace("\r")
    assert not is_whitespace("\n")
    assert not is_whitespace("")
    assert not is_whitespace("a")


def test_is_map_char_respects_length():
    assert is_map_char("D", 7)
    assert not is_map_char("D", 6)
    assert is_map_char(" ", 8)
    assert not is_map_char(" ", 7)
    assert is_map_char("N", 4)
    assert not is_map_char("0", 4)
    assert not is_map_char("", 8)


@pytest.mark.parametrize(
    "text, expected",
    [
        (" 220,100,0\n", (220, 100, 0)),
        ("  0,0,0\n", (0, 0, 0)),
        ("255,255,255   \n", (255, 255, 255)),
        (",1,2\n", (0, 1, 2)),
    ],
)
def test_parse_color_valid(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        " 256,0,0\n",
        " 1,2,3",
        " 1 ,2,3\n",
        " 1,2, 3\n",
        " +5,1,1\n",
        " 1,2\n",
        " 1,2,3x\n",
        "\n",
    ],
)
def test_parse_color_invalid(text):
    with pytest.raises(FileCheckError) as info:
        parse_color(text)
    assert info.value.code == 1


def test_scan_valid_file():
    summary = scan_lines(VALID)
    assert summary.rows == len(MAP)
    assert summary.cols == len("1111")
    assert summary.player_count == 1
    assert (summary.player_x, summary.player_y) == (1.5, 1.5)
    assert summary.floor == (220, 100, 0)
    assert summary.ceiling == (225, 30, 0)
    assert summary.map_start == VALID.index("1111\n")
    assert not summary.has_doors


def test_scan_detects_doors():
    lines = HEADER + ["11111\n", "1N0D1\n", "11111\n"]
    assert scan_lines(lines).has_doors


def test_single_trailing_blank_line_allowed():
    summary = scan_lines(VALID + ["\n"])
    assert summary.after_map
    assert summary.rows == len(MAP)


def test_two_trailing_blank_lines_rejected():
    assert code_of(VALID + ["\n", "\n"]) == 4


def test_content_after_map_rejected():
    assert code_of(VALID + ["\n", "111\n"]) == 4


def test_empty_file():
    assert code_of([]) == 10


def test_missing_identifier_before_map():
    lines = [line for line in VALID if not line.startswith("F")]
    assert code_of(lines) == 3


def test_no_map():
    assert code_of(HEADER) == 6


def test_map_too_small():
    assert code_of(HEADER + ["1111\n", "1N01\n"]) == 4


def test_two_players():
    assert code_of(HEADER + ["1111\n", "1NS1\n", "1111\n"]) == 8


def test_no_player():
    assert code_of(HEADER + ["1111\n", "1001\n", "1111\n"]) == 8


def test_duplicate_texture():
    assert code_of(["NO a\n", "NO b\n"]) == 3


def test_invalid_identifier():
    assert code_of(["X foo\n"]) == 5


def test_bad_color_line():
    assert code_of(["F 256,0,0\n"]) == 1
    assert code_of(["F\n"]) == 1


def test_bad_texture_lines():
    assert code_of(["NOfoo\n"]) == 2
    assert code_of(["NO   \n"]) == 2


def test_invalid_map_character():
    assert code_of(HEADER + ["1111\n", "1NX1\n", "1111\n"]) == 4


def test_identifier_after_complete_header():
    assert code_of(VALID[:7] + ["NO again\n"]) == 4