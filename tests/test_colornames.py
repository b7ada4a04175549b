import pytest

from raytrace1.colornames import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_means_transparent():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("red")


def test_name_with_space_matches_table_entry():
    assert lookup_color("Ghost White") == lookup_color("ghostwhite")


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light slate") == lookup_color("lightslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


@pytest.mark.parametrize("name", ["", "nosuchcolour", "red ", "#ff0000"])
def test_unknown_names_give_none(name):
    assert lookup_color(name) is None


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_values_fit_in_24_bits():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_keys_are_lower_case_and_found():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert lookup_color(name.upper()) == value


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["red"] = 0  # type: ignore[index]
    assert lookup_color("red") == 0xFF0000