import pytest

from solong.colors import COLOR_TABLE, lookup_color, text_to_rgb


def test_lookup_known_names():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("red") == 0xFF0000
    assert lookup_color("none") == -1


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_lookup_first_entry_wins_for_duplicates():
    # "dark slate" appears several times; the first one is used.
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_lookup_does_not_fold_non_ascii():
    with pytest.raises(KeyError):
        lookup_color("\u212aHAKI")  # Kelvin sign is not ASCII "K"


@pytest.mark.parametrize("name,color", COLOR_TABLE)
def test_every_entry_resolves_to_first_occurrence(name, color):
    first = next(c for n, c in COLOR_TABLE if n.lower() == name.lower())
    assert lookup_color(name) == first
    assert lookup_color(name.upper()) == first


def test_text_hex_value():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("#ffffff", None) == 0xFFFFFF


def test_text_hex_ignores_second_word():
    assert text_to_rgb("#00ff00", "ignored") == 0x00FF00


def test_text_hex_invalid_gives_zero():
    assert text_to_rgb("#zz") == 0
    assert text_to_rgb("#") == 0


def test_text_hex_stops_at_first_non_digit():
    assert text_to_rgb("#12zz") == 0x12


def test_text_name_single_word():
    assert text_to_rgb("black", None) == 0x0
    assert text_to_rgb("Blue") == 0xFF


def test_text_name_two_words():
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("dark", "slate") == 0x2F4F4F


def test_text_none_is_transparent_marker():
    assert text_to_rgb("None") == -1


def test_text_unknown_gives_zero():
    assert text_to_rgb("nonexistent") == 0
    assert text_to_rgb("ghost", "black") == 0


def test_text_long_combination_is_truncated():
    long_tail = "x" * 100
    assert text_to_rgb("snow", long_tail) == 0


def test_text_matches_lookup_for_table_names():
    for name, _ in COLOR_TABLE[:20]:
        assert text_to_rgb(name) == lookup_color(name)