import pytest

from raytrace1.xpm import (
    XpmError,
    XpmImage,
    find_substring,
    find_unquoted,
    parse_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."]


def test_find_substring_found():
    assert find_substring("hello world", "world", 11) == 6


def test_find_substring_missing_and_too_long():
    assert find_substring("hello", "xyz", 5) is None
    assert find_substring("hello", "hello", 4) is None


def test_find_substring_empty_needle():
    with pytest.raises(ValueError):
        find_substring("abc", "", 3)


def test_find_unquoted_skips_quoted():
    text = '"/*" /*'
    assert find_unquoted(text, "/*", len(text)) == 5


def test_find_unquoted_only_quoted():
    text = 'a "//" b'
    assert find_unquoted(text, "//", len(text)) is None


def test_split_words():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_block():
    text = "a/* x */b"
    result = strip_comments(text)
    assert result == "a" + " " * 7 + "b"
    assert len(result) == len(text)


def test_strip_comments_line_and_quotes():
    text = '"/* kept */" // gone\nnext'
    result = strip_comments(text)
    assert result.startswith('"/* kept */"')
    assert "gone" not in result
    assert result.endswith("next")
    assert len(result) == len(text)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff00ff", None) == 0xFF00FF
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_names():
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("RED", None) == 0xFF0000
    assert text_to_rgb("light", "blue") == 0xADD8E6
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("not-a-colour", None) == 0


def test_parse_xpm_sample():
    image = parse_xpm(SAMPLE)
    assert image == XpmImage(2, 2, (0x000000, 0xFFFFFF, 0xFFFFFF, 0x000000))


def test_parse_xpm_transparent():
    image = parse_xpm(["1 1 1 1", "  c None", " "])
    assert image.pixels == (0xFF000000,)


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 2", "aa c #000001", "aa c #000002", "aa"])
    assert image.pixels == (0x000002,)


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixels == (0x000001,)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", ". c red", "."],
        ["1 1 1"],
        ["1 1 1 1", ". s red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 2 1 1", ". c red", "."],
        ["2 1 1 1", ". c red", "."],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE) == parse_xpm(SAMPLE)


def test_xpm_file_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    body = "\n".join(
        [
            "/* XPM */",
            "static char *sample[] = {",
            "/* columns rows colors chars-per-pixel */",
            '"2 2 2 1",',
            '". c #000000",',
            '"# c #FFFFFF", // white',
            "/* pixels */",
            '".#",',
            '"#."',
            "};",
        ]
    )
    path.write_text(body, encoding="latin-1")
    assert xpm_file_to_image(path) == xpm_to_image(SAMPLE)


def test_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")