import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    Tile,
    check_ber,
    check_reachable,
    count_elements,
    count_lines,
    load_map,
    parse_map,
)

VALID = "1111111\n1P0C0E1\n1000001\n1111111"
BRANCHING = "11111\n1CPE1\n11111"


def _open_cells(rows):
    return {(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch != "1"}


def test_check_ber_accepts_ber_name():
    assert check_ber("maps/level.ber") == "maps/level.ber"


@pytest.mark.parametrize("name", ["map.txt", "ber", "", "level.be", "level.ber.txt"])
def test_check_ber_rejects_other_names(name):
    with pytest.raises(MapError, match="Please provide a .ber file"):
        check_ber(name)


def test_count_lines_counts_newlines(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text(VALID)
    assert count_lines(path) == VALID.count("\n")


def test_count_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="Please provide a valid map"):
        count_lines(tmp_path / "absent.ber")


def test_parse_map_returns_rows():
    assert parse_map(VALID) == VALID.split("\n")


@pytest.mark.parametrize("text", ["11111", "1111\n1111", ""])
def test_parse_map_too_small(text):
    with pytest.raises(MapError, match="Map is too small"):
        parse_map(text)


def test_parse_map_trailing_newline():
    with pytest.raises(MapError, match="last line is null"):
        parse_map(VALID + "\n")


@pytest.mark.parametrize(
    "text",
    [
        "1101\n1P01\n1111",
        "1111\n0PC1\n1111",
        "1111\n1PC0\n1111",
        "1111\n1PC1\n111",
        "1111\n1PC1\n1011",
        "1111\n\n1111",
        "1111\n1P1\n1111",
        "1111\n1PCE1\n1111",
        VALID + "\n\n",
    ],
)
def test_parse_map_not_rectangle(text):
    with pytest.raises(MapError, match="Map is not a rectangle"):
        parse_map(text)


def test_count_elements_finds_player_and_collectibles():
    rows = VALID.split("\n")
    player, collectibles = count_elements(rows)
    assert player == (1, rows[1].index("P"))
    assert collectibles == VALID.count("C")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("11111\n1PXE1\n11111", "Invalid element in map"),
        ("111111\n1PPCE1\n111111", "Too many players"),
        ("11111\n10CE1\n11111", "No player"),
        ("11111\n1P0E1\n11111", "No collectable"),
        ("11111\n1PC01\n11111", "No exit"),
        ("111111\n1PCEE1\n111111", "Too many exits"),
    ],
)
def test_count_elements_errors(text, message):
    with pytest.raises(MapError, match=message):
        count_elements(text.split("\n"))


def test_check_reachable_covers_connected_map():
    rows = VALID.split("\n")
    player, collectibles = count_elements(rows)
    reached = check_reachable(rows, player, collectibles)
    assert reached == _open_cells(rows)
    assert player in reached


def test_check_reachable_branching_map():
    rows = BRANCHING.split("\n")
    player, collectibles = count_elements(rows)
    assert check_reachable(rows, player, collectibles) == _open_cells(rows)


def test_check_reachable_never_enters_walls():
    rows = "1111111\n1PE1C01\n1111111".split("\n")
    with pytest.raises(MapError):
        check_reachable(rows, (1, 1), 1)
    reached = check_reachable(rows, (1, 1), 0)
    assert all(rows[r][c] != "1" for r, c in reached)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("1111111\n1PE1C01\n1111111", "Collectable is not reachable"),
        ("1111111\n1PC1E01\n1111111", "Exit is not reachable"),
        ("1111111\n1P01CE1\n1111111", "Collectable and Exit is not reachable"),
    ],
)
def test_check_reachable_errors(text, message):
    rows = text.split("\n")
    player, collectibles = count_elements(rows)
    with pytest.raises(MapError, match=f"^{message}$"):
        check_reachable(rows, player, collectibles)


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    game_map = load_map(path)
    rows = VALID.split("\n")
    assert game_map.rows == tuple(rows)
    assert game_map.width == len(rows[0])
    assert game_map.height == len(rows)
    assert game_map.collectibles == VALID.count("C")
    assert game_map.tile(*game_map.player) is Tile.PLAYER
    assert game_map.tile(0, 0) is Tile.WALL


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Cannot open file"):
        load_map(tmp_path / "absent.ber")


def test_load_map_rejects_unreachable_exit(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("1111111\n1PC1E01\n1111111")
    with pytest.raises(MapError, match="Exit is not reachable"):
        load_map(path)


def test_load_map_rejects_non_ascii(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(b"11111\n1P\xe9E1\n11111")
    with pytest.raises(MapError, match="Invalid element in map"):
        load_map(path)


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (4, 0), (0, 7)])
def test_tile_out_of_range(position):
    game_map = GameMap(tuple(VALID.split("\n")), (1, 1), 1)
    with pytest.raises(IndexError):
        game_map.tile(*position)