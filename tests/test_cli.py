import pytest

from solong.cli import main, prepare_game
from solong.mapfile import MapError

VALID = "1111111\n1P0C0E1\n1111111\n"


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_prepare_game_valid_map(tmp_path):
    game = prepare_game([_write(tmp_path, VALID)])
    assert game.rows() == ["1111111", "1P0C0E1", "1111111"]
    assert game.player_position() == (1, 1)
    assert game.moves == 0


def test_prepare_game_wrong_argument_count():
    with pytest.raises(MapError, match="arg non valide"):
        prepare_game([])


def test_prepare_game_wrong_extension(tmp_path):
    with pytest.raises(MapError, match="no .BER"):
        prepare_game([_write(tmp_path, VALID, "map.txt")])


def test_prepare_game_empty_file(tmp_path):
    with pytest.raises(MapError, match="MAP vide"):
        prepare_game([_write(tmp_path, "")])


def test_prepare_game_missing_file(tmp_path):
    with pytest.raises(MapError, match="Fichier inexistant"):
        prepare_game([str(tmp_path / "absent.ber")])


def test_prepare_game_unreachable_collectible(tmp_path):
    text = "11111111\n1P01C0E1\n11111111\n"
    with pytest.raises(MapError, match="Pas de chemin"):
        prepare_game([_write(tmp_path, text)])


def test_main_reports_not_rectangular(tmp_path, capsys):
    path = _write(tmp_path, "11111\n1PCE1\n111\n")
    assert main([path]) == 1
    assert capsys.readouterr().err == "Error\nMap pas rectangle"


def test_main_reports_bad_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().err == "Error\narg non valide"


def test_main_reports_missing_wall(tmp_path, capsys):
    path = _write(tmp_path, "1111111\n0P0C0E1\n1111111\n")
    assert main([path]) == 1
    assert capsys.readouterr().err == "Error\nWall"