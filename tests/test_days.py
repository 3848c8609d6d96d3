from __future__ import annotations

from pathlib import Path

import pytest

from aoc2023 import NumberOverflowError, ParseError
from aoc2023.days import (
    day02,
    day04,
    day05,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
)
from aoc2023.grid import grid_lexicon, read_grid, read_grids


FIXTURES = Path(__file__).parent / "fixtures"


def _example(day: int, suffix: str = "test") -> str:
    return (FIXTURES / f"day_{day:02d}_{suffix}.txt").read_text(encoding="utf-8")


# --- day 2 -------------------------------------------------------------------


def test_day02_example_answers() -> None:
    assert day02.part_1(_example(2)) == 8
    assert day02.part_2(_example(2)) == 2286


def test_day02_game_records() -> None:
    games = day02.parse(_example(2), file="games.txt")
    assert [g.number for g in games] == [1, 2, 3, 4, 5]
    first = games[0]
    assert first.reveals == (
        day02.Reveal(red=4, blue=3),
        day02.Reveal(red=1, green=2, blue=6),
        day02.Reveal(green=2),
    )
    assert first.minimum_bag() == day02.Reveal(red=4, green=2, blue=6)
    assert first.span.start.line == 1 and first.span.end.line == 1
    assert not games[2].possible_with(day02.BAG)


def test_day02_unknown_colour() -> None:
    with pytest.raises(ParseError) as e:
        day02.parse("Game 1: 3 purple\n")
    assert "unknown colour 'purple'" in str(e.value)
    assert "red, green, blue" in str(e.value)


def test_day02_missing_game_keyword() -> None:
    with pytest.raises(ParseError) as e:
        day02.parse("Round 1: 3 red\n")
    assert "unexpected 'Round'" in str(e.value)
    assert "expected one of: 'Game'" in str(e.value)


# --- day 4 -------------------------------------------------------------------


def test_day04_example_answers() -> None:
    assert day04.part_1(_example(4)) == 13
    assert day04.part_2(_example(4)) == 30


def test_day04_card_matches() -> None:
    cards = day04.parse(_example(4))
    assert [c.matches for c in cards] == [4, 2, 2, 1, 0, 0]
    assert cards[0].points == 8
    assert cards[-1].points == 0


def test_day04_card_numbers_are_bytes() -> None:
    assert day04.part_1("Card 1: 255 | 255\n") == 1
    with pytest.raises(NumberOverflowError) as e:
        day04.parse("Card 1: 256 | 1\n")
    assert e.value.bits == 8


def test_day04_missing_separator() -> None:
    with pytest.raises(ParseError) as e:
        day04.parse("Card 1: 1 2 3\nCard 2: 4 | 5\n")
    assert "expected one of: |" in str(e.value)


# --- day 9 -------------------------------------------------------------------


def test_day09_example_answers() -> None:
    assert day09.part_1(_example(9)) == 114
    assert day09.part_2(_example(9)) == 2


def test_day09_history_prediction() -> None:
    h = day09.History((10, 13, 16, 21, 30, 45))
    assert h.predict() == 68
    assert h.predict_back() == 5
    assert day09.History((7,)).predict() == 7


def test_day09_blank_lines_and_negative_values() -> None:
    histories = day09.parse("\n\n-1 -2 -3\n\n4 4\n\n")
    assert histories == [day09.History((-1, -2, -3)), day09.History((4, 4))]
    assert sum(h.predict() for h in histories) == -4 + 4


# --- day 15 ------------------------------------------------------------------


def test_day15_hash() -> None:
    assert day15.hash_("HASH") == 52
    assert day15.hash_("rn") == 0
    assert day15.hash_("qp") == 1


def test_day15_example_answers() -> None:
    assert day15.part_1(_example(15)) == 1320
    assert day15.part_2(_example(15)) == 145


def test_day15_newlines_are_ignored() -> None:
    assert day15.part_1("rn=1,\ncm-\n") == day15.part_1("rn=1,cm-")


def test_day15_arrangement_keeps_slot_order() -> None:
    boxes = day15.arrange(day15.parse(_example(15)))
    assert list(boxes[0].items()) == [("rn", 1), ("cm", 2)]
    assert list(boxes[3].items()) == [("ot", 7), ("ab", 5), ("pc", 6)]


def test_day15_bad_operation() -> None:
    with pytest.raises(ParseError) as e:
        day15.parse("rn*1")
    assert "unexpected character '*'" in str(e.value)
    with pytest.raises(ParseError) as e:
        day15.parse("rn,cm-")
    assert "expected one of: =, -" in str(e.value)


def test_day15_line_breaks_inside_a_step() -> None:
    assert day15.part_1("rn=\n1") == day15.part_1("rn=1")
    steps = day15.parse("rn=1,c\nm-")
    assert steps[1].label == "cm"
    assert steps[1].text == "cm-"
    assert steps[1].span.start.line == 1 and steps[1].span.end.line == 2
    assert day15.parse("ab=1\r\n2")[0].focal_length == 12


# --- day 9, signs ------------------------------------------------------------


def test_day09_minus_between_digits_is_not_a_sign() -> None:
    with pytest.raises(ParseError) as e:
        day09.parse("1-2\n")
    assert "unexpected character '-'" in str(e.value)
    assert day09.parse("1 -2\n") == [day09.History((1, -2))]


# --- grids -------------------------------------------------------------------


DOTS = grid_lexicon("dots", ".#")


def test_grids_split_on_blank_lines() -> None:
    grids = read_grids("\n#.\n.#\n\n\n..\n..\n", DOTS)
    assert [g.rows for g in grids] == [("#.", ".#"), ("..", "..")]
    assert grids[1].span.start.line == 6
    assert list(grids[0].find("#")) == [(0, 0), (1, 1)]
    assert grids[0].columns() == ("#.", ".#")


def test_grid_allows_trailing_blanks_and_crlf() -> None:
    grid = read_grid("#. \r\n.#\t\r\n", DOTS)
    assert grid.rows == ("#.", ".#")
    assert (1, 1) in grid and (2, 0) not in grid
    assert grid[(1, 1)] == "#"


def test_grid_ragged_row() -> None:
    with pytest.raises(ParseError) as e:
        read_grid("#..\n#.\n", DOTS, file="g.txt")
    assert "row has 2 cells, expected 3" in str(e.value)
    assert "g.txt:2:1" in str(e.value)


def test_grid_count_errors() -> None:
    with pytest.raises(ParseError) as e:
        read_grid("\n\n", DOTS)
    assert "empty grid" in str(e.value)
    with pytest.raises(ParseError) as e:
        read_grid("#\n\n#\n", DOTS)
    assert "expected one grid, found 2" in str(e.value)
    with pytest.raises(ParseError) as e:
        read_grid("#x\n", DOTS)
    assert "unexpected character 'x'" in str(e.value)


# --- day 5 -------------------------------------------------------------------


def test_day05_example_answers() -> None:
    assert day05.part_1(_example(5)) == 35
    assert day05.part_2(_example(5)) == 46


def test_day05_almanac_chain() -> None:
    almanac = day05.parse(_example(5))
    assert almanac.seeds == (79, 14, 55, 13)
    assert [m.source for m in almanac.maps][:2] == ["seed", "soil"]
    assert almanac.maps[-1].destination == "location"
    assert [almanac.location(s) for s in almanac.seeds] == [82, 43, 86, 35]
    assert almanac.seed_ranges() == [(79, 93), (55, 68)]


def test_day05_interval_is_split_at_entry_edges() -> None:
    soil = day05.parse(_example(5)).maps[0]
    assert list(soil.map_interval(45, 55)) == [(45, 50), (52, 57)]
    assert list(soil.map_interval(97, 101)) == [(99, 100), (50, 52), (100, 101)]
    assert list(soil.map_interval(0, 10)) == [(0, 10)]


def test_day05_broken_chains() -> None:
    with pytest.raises(ParseError) as e:
        day05.parse("seeds: 1\n\nsoil-to-location map:\n1 2 3\n")
    assert "map from 'soil' does not follow 'seed'" in str(e.value)
    with pytest.raises(ParseError) as e:
        day05.parse("seeds: 1\n\nseed-to-soil map:\n1 2 3\n")
    assert "almanac stops at 'soil', not 'location'" in str(e.value)
    with pytest.raises(ParseError) as e:
        day05.parse("seeds: 1\n\nseed-to-location map:\n0 10 5\n0 12 5\n")
    assert "overlapping source ranges in seed-to-location map" in str(e.value)


def test_day05_seed_ranges_come_in_pairs() -> None:
    src = "seeds: 1 2 3\n\nseed-to-location map:\n10 1 1\n"
    assert day05.part_1(src) == 2
    with pytest.raises(ParseError) as e:
        day05.part_2(src)
    assert "even number of values" in str(e.value)


# --- day 7 -------------------------------------------------------------------


def test_day07_example_answers() -> None:
    assert day07.part_1(_example(7)) == 6440
    assert day07.part_2(_example(7)) == 5905


def test_day07_hand_types() -> None:
    two_pair = day07.TYPES.index((2, 2, 1))
    four_of_a_kind = day07.TYPES.index((4, 1))
    hand = day07.Hand(cards="KTJJT", bid=220)
    assert hand.strength()[0] == two_pair
    assert hand.strength(jokers=True)[0] == four_of_a_kind
    assert day07.Hand(cards="JJJJJ", bid=1).strength(jokers=True)[0] == len(day07.TYPES) - 1
    # Jokers are the weakest card when breaking ties.
    assert day07.Hand("J2345", 1).strength(jokers=True) < day07.Hand("22345", 1).strength(jokers=True)


def test_day07_invalid_hands() -> None:
    for line in ("32T3X 1\n", "32T3 1\n", "32T3KK 1\n"):
        with pytest.raises(ParseError) as e:
            day07.parse(line)
        assert "invalid hand" in str(e.value)
    with pytest.raises(ParseError) as e:
        day07.parse("32T3K AB\n")
    assert "invalid integer 'AB'" in str(e.value)


# --- day 8 -------------------------------------------------------------------


def test_day08_example_answers() -> None:
    assert day08.part_1(_example(8)) == 2
    assert day08.part_1(_example(8, "test_2")) == 6
    assert day08.part_2(_example(8, "part_2_test")) == 6


def test_day08_network() -> None:
    net = day08.parse(_example(8, "test_2"))
    assert net.instructions == "LLR"
    assert net.nodes["BBB"] == ("AAA", "ZZZ")


def test_day08_bad_networks() -> None:
    cases = {
        "LX\n\nAAA = (AAA, AAA)\n": "bad instructions 'LX'",
        "L\n\nAAA = (BBB, AAA)\n": "node 'BBB' is referenced but never defined",
        "L\n\nAAA = (AAA, AAA)\nAAA = (AAA, AAA)\n": "node 'AAA' defined twice",
        "L\n\nAAA = AAA, AAA)\n": "expected one of: (",
    }
    for src, message in cases.items():
        with pytest.raises(ParseError) as e:
            day08.parse(src)
        assert message in str(e.value)
    with pytest.raises(ParseError) as e:
        day08.part_1("L\n\nBBB = (BBB, BBB)\n")
    assert "no AAA node" in str(e.value)


# --- day 10 ------------------------------------------------------------------


def test_day10_example_answers() -> None:
    assert day10.part_1(_example(10)) == 4
    assert day10.part_1(_example(10, "test_2")) == 8
    assert day10.part_2(_example(10, "part_2_test")) == 4
    assert day10.part_2(_example(10, "part_2_test_2")) == 8


def test_day10_loop_through_start() -> None:
    grid = read_grid(_example(10), day10.LEXICON)
    path = day10.loop(grid)
    assert path[0] == (1, 1)
    assert sorted(path) == sorted([(1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 2), (3, 1), (2, 1)])
    assert day10.enclosed(path) == 1


def test_day10_broken_loops() -> None:
    with pytest.raises(ParseError) as e:
        day10.part_1("F7\nLJ\n")
    assert "expected one start tile, found 0" in str(e.value)
    with pytest.raises(ParseError) as e:
        day10.part_1("S-.\n")
    assert "start tile connects to 1 pipes, expected 2" in str(e.value)
    with pytest.raises(ParseError) as e:
        day10.part_1("S-7\n|.|\nL-.\n")
    assert "loop breaks at row 3, column 3" in str(e.value)


# --- day 11 ------------------------------------------------------------------


def test_day11_example_answers() -> None:
    assert day11.part_1(_example(11)) == 374
    assert day11.part_2(_example(11)) == 82000210


def test_day11_expansion_factors() -> None:
    grid = read_grid(_example(11), day11.LEXICON)
    assert len(day11.galaxies(grid)) == 9
    assert day11.total_distance(grid, 10) == 1030
    assert day11.total_distance(grid, 100) == 8410
    line = read_grid("#..#\n", day11.LEXICON)
    assert day11.total_distance(line, 1) == 3
    assert day11.total_distance(line, 2) == 5


# --- day 12 ------------------------------------------------------------------


def test_day12_example_answers() -> None:
    assert day12.part_1(_example(12)) == 21
    assert day12.part_2(_example(12)) == 525152


def test_day12_arrangements_per_row() -> None:
    rows = day12.parse(_example(12))
    assert [r.arrangements() for r in rows] == [1, 4, 1, 1, 4, 10]
    assert [r.unfold().arrangements() for r in rows] == [1, 16384, 1, 16, 2500, 506250]
    assert rows[0].unfold(2) == day12.Row(springs="???.###????.###", groups=(1, 1, 3, 1, 1, 3))


def test_day12_bad_record() -> None:
    with pytest.raises(ParseError) as e:
        day12.parse("???.### 1,\n")
    assert "expected one of: NUMBER" in str(e.value)


# --- day 13 ------------------------------------------------------------------


def test_day13_example_answers() -> None:
    assert day13.part_1(_example(13)) == 405
    assert day13.part_2(_example(13)) == 400


def test_day13_reflections() -> None:
    first, second = read_grids(_example(13), day13.LEXICON)
    assert day13.summarize(first) == 5
    assert day13.summarize(second) == 400
    assert day13.summarize(first, smudges=1) == 300
    assert day13.summarize(second, smudges=1) == 100


def test_day13_pattern_without_reflection() -> None:
    with pytest.raises(ParseError) as e:
        day13.part_1("#.\n.#\n")
    assert "pattern has no line of reflection" in str(e.value)


# --- day 14 ------------------------------------------------------------------


def test_day14_example_answers() -> None:
    assert day14.part_1(_example(14)) == 136
    assert day14.part_2(_example(14)) == 64


def test_day14_one_spin_cycle() -> None:
    rows = read_grid(_example(14), day14.LEXICON).rows
    after = (
        ".....#....",
        "....#...O#",
        "...OO##...",
        ".OO#......",
        ".....OOO#.",
        ".O#...O#.#",
        "....O#....",
        "......OOOO",
        "#...O###..",
        "#..OO#....",
    )
    assert day14.spin(rows) == after
    assert day14.part_2(_example(14), spins=1) == day14.load(after) == 87


def test_day14_rotate_and_tilt() -> None:
    assert day14.rotate(("ab", "cd")) == ("ca", "db")
    assert day14.tilt_north((".", "O", "#", ".", "O")) == ("O", ".", "#", "O", ".")


# --- day 16 ------------------------------------------------------------------


def test_day16_example_answers() -> None:
    assert day16.part_1(_example(16)) == 46
    assert day16.part_2(_example(16)) == 51


def test_day16_beams() -> None:
    grid = read_grid(_example(16), day16.LEXICON)
    assert day16.energized(grid, (0, 3), day16.SOUTH) == 51
    assert len(day16.entries(grid)) == 2 * (grid.height + grid.width)
    # The beam comes back round to the splitter it started on.
    assert day16.part_1("-\\\n\\/\n") == 4


# --- day 17 ------------------------------------------------------------------


def test_day17_example_answers() -> None:
    assert day17.part_1(_example(17)) == 102
    assert day17.part_2(_example(17)) == 94


def test_day17_ultra_crucible_must_run_four_blocks() -> None:
    src = "111111111111\n999999999991\n999999999991\n999999999991\n999999999991\n"
    assert day17.part_2(src) == 71
    with pytest.raises(ParseError) as e:
        day17.part_2("12\n34\n")
    assert "no path to the factory" in str(e.value)
