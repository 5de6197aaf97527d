import pytest

from solong.mapfile import MapError
from solong.validation import (
    check_arguments,
    check_path,
    check_readable,
    count_tiles,
    find_player,
    flood_fill,
    has_ber_extension,
    has_valid_characters,
    is_rectangular,
    is_walled,
    validate_map,
)

GOOD = ["1111111", "1PC0E01", "1111111"]


def test_ber_extension():
    assert has_ber_extension("maps/level.ber")
    assert not has_ber_extension("maps/level.txt")
    assert not has_ber_extension("level.ber.txt")


def test_check_arguments_returns_path():
    assert check_arguments(["map.ber"]) == "map.ber"


@pytest.mark.parametrize("args", [[], ["a.ber", "b.ber"]])
def test_check_arguments_count(args):
    with pytest.raises(MapError, match="arg non valide"):
        check_arguments(args)


def test_check_arguments_extension():
    with pytest.raises(MapError, match="no .BER"):
        check_arguments(["map.txt"])


def test_check_readable_missing(tmp_path):
    with pytest.raises(MapError, match="Fichier inexistant"):
        check_readable(tmp_path / "missing.ber")


def test_check_readable_empty(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="MAP vide"):
        check_readable(path)


def test_check_readable_ok(tmp_path):
    path = tmp_path / "ok.ber"
    path.write_text("\n".join(GOOD))
    assert check_readable(path) == path


def test_count_tiles():
    counts = count_tiles(GOOD)
    assert counts["P"] == 1
    assert counts["E"] == 1
    assert counts["C"] == 1
    assert sum(counts.values()) == sum(len(row) for row in GOOD)


def test_valid_characters():
    assert has_valid_characters(GOOD)
    assert not has_valid_characters(["111", "1x1"])


def test_rectangular():
    assert is_rectangular(GOOD)
    assert not is_rectangular(["111", "1P1", "111"])
    assert not is_rectangular(["11111", "1P1", "11111"])
    assert not is_rectangular([])


def test_walled():
    assert is_walled(GOOD)
    assert not is_walled(["1111", "1P0E", "1111"])
    assert not is_walled(["1101", "1P01", "1111"])
    assert not is_walled(["1111", "1P01", "1011"])


def test_validate_map_accepts_good():
    assert validate_map(GOOD) == GOOD


def test_validate_map_counts():
    with pytest.raises(MapError, match="PEC"):
        validate_map(["11111", "1P0E1", "11111"])


def test_validate_map_shape():
    with pytest.raises(MapError, match="rectangle"):
        validate_map(["1111", "1PCE1", "11111"])


def test_validate_map_wall():
    with pytest.raises(MapError, match="Wall"):
        validate_map(["1111x", "1PCE1", "11111"])


def test_validate_map_invalid_character():
    with pytest.raises(MapError, match="Caracter invalide"):
        validate_map(["111111", "1PCEx1", "111111"])


def test_validate_map_empty():
    with pytest.raises(MapError):
        validate_map([])


def test_find_player():
    assert find_player(GOOD) == (1, GOOD[1].index("P"))


def test_find_player_missing():
    with pytest.raises(MapError):
        find_player(["111", "101", "111"])


def test_flood_fill_keeps_shape_and_stops_at_exit():
    filled = flood_fill(GOOD, *find_player(GOOD))
    assert [len(r) for r in filled] == [len(r) for r in GOOD]
    assert filled[0] == GOOD[0]
    assert "E" in filled[1]
    assert "C" not in filled[1]
    assert filled[1][GOOD[1].index("E") + 1] == "0"


def test_check_path_ok():
    filled = check_path(GOOD)
    assert "C" not in "".join(filled)
    assert GOOD[1][1] == "P"


def test_check_path_blocked_collectible():
    with pytest.raises(MapError, match="Pas de chemin"):
        check_path(["11111111", "1P0E0C01", "11111111"])


def test_check_path_blocked_exit():
    with pytest.raises(MapError, match="Pas de chemin"):
        check_path(["11111111", "1PC01E01", "11111111"])