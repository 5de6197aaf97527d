import pytest

from solong.mapfile import (
    MapError,
    check_blank_lines,
    load_map,
    read_map_text,
    split_rows,
)


def test_check_blank_lines_accepts_plain_map():
    text = "111\n1P1\n111\n"
    assert check_blank_lines(text) == text


def test_check_blank_lines_leading_newline():
    with pytest.raises(MapError, match="Ligne vide"):
        check_blank_lines("\n111")


def test_check_blank_lines_double_newline():
    with pytest.raises(MapError, match="trop despaces"):
        check_blank_lines("111\n\n111")


def test_check_blank_lines_trailing_double_newline():
    with pytest.raises(MapError, match="trop despaces"):
        check_blank_lines("111\n111\n\n")


def test_split_rows_drops_empty_pieces():
    assert split_rows("111\n1P1\n\n") == ["111", "1P1"]


def test_split_rows_empty():
    assert split_rows("") == []


def test_read_map_text_round_trip(tmp_path):
    path = tmp_path / "map.ber"
    content = "1111\n1PCE\r\n1111"
    path.write_bytes(content.encode("latin-1"))
    assert read_map_text(path) == content


def test_read_map_text_missing(tmp_path):
    with pytest.raises(MapError, match="Fichier inexistant"):
        read_map_text(tmp_path / "absent.ber")


def test_load_map_rows(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PCE1\n11111\n", encoding="latin-1")
    assert load_map(path) == ["11111", "1PCE1", "11111"]


def test_load_map_keeps_carriage_returns(tmp_path):
    path = tmp_path / "map.ber"
    path.write_bytes(b"111\r\n1P1\r\n")
    assert load_map(path) == ["111\r", "1P1\r"]


def test_load_map_blank_line(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n\n111\n", encoding="latin-1")
    with pytest.raises(MapError):
        load_map(path)