# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import pytest

from advent_of_code_2023.models import Coordinate, Direction, GridModel, ParseError


def test_direction_delta() -> None:
    assert Direction.NORTH.delta == (0, -1)
    assert Direction.EAST.delta == (1, 0)
    assert Direction.SOUTH.delta == (0, 1)
    assert Direction.WEST.delta == (-1, 0)


def test_direction_turns() -> None:
    for d in Direction:
        assert d.turn_left.turn_right == d
        assert d.opposite.opposite == d
        assert d.turn_left.turn_left == d.opposite
    assert Direction.NORTH.turn_left == Direction.WEST
    assert Direction.NORTH.turn_right == Direction.EAST


def test_direction_from_letter() -> None:
    assert Direction.from_letter("U") == Direction.NORTH
    assert Direction.from_letter("L") == Direction.WEST
    with pytest.raises(ParseError):
        Direction.from_letter("X")


def test_coordinate_translate() -> None:
    c = Coordinate(2, 3)
    assert c.translate(Direction.NORTH) == Coordinate(2, 2)
    assert c.translate(Direction.WEST, 5) == Coordinate(-3, 3)
    assert str(c) == "(2,3)"


def test_coordinate_neighbors() -> None:
    c = Coordinate(0, 0)
    assert {n for _, n in c.neighbors()} == {Coordinate(0, -1), Coordinate(1, 0), Coordinate(0, 1), Coordinate(-1, 0)}
    assert len(set(c.neighbors8())) == 8
    assert c not in set(c.neighbors8())
    assert c.manhattan(Coordinate(-2, 3)) == 5


def test_grid_from_string() -> None:
    grid = GridModel.from_string("#..\n.#\n", {"#": 1})
    assert grid.width == 3
    assert grid.height == 2
    assert grid.cells == {Coordinate(0, 0): 1, Coordinate(1, 1): 1}
    assert grid.get(Coordinate(1, 0)) is None
    assert grid.in_bounds(Coordinate(2, 1))
    assert not grid.in_bounds(Coordinate(3, 0))
    assert not grid.in_bounds(Coordinate(0, -1))


def test_grid_unknown_tile() -> None:
    with pytest.raises(ParseError) as e:
        GridModel.from_string("..\n.x\n", {"#": 1})
    assert e.value.char == "x"
    assert e.value.line == 2
    assert e.value.column == 2
    assert "Unknown tile 'x' at line 2, column 2" in str(e.value)


def test_grid_without_background() -> None:
    grid = GridModel.from_string("12\n34\n", {str(d): d for d in range(10)}, background=None)
    assert len(grid.cells) == 4
    with pytest.raises(ParseError):
        GridModel.from_string("1.\n", {"1": 1}, background=None)


def test_grid_empty_input() -> None:
    grid: GridModel[int] = GridModel.from_string("", {"#": 1})
    assert (grid.width, grid.height) == (0, 0)
    assert grid.cells == {}


def test_grid_rejects_cells_out_of_bounds() -> None:
    with pytest.raises(ValueError):
        GridModel(width=2, height=2, cells={Coordinate(2, 0): "x"})


def test_grid_wrap() -> None:
    grid = GridModel.from_string("#.\n..\n", {"#": "rock"}, wrap=True)
    assert grid.in_bounds(Coordinate(-7, 100))
    assert grid.get(Coordinate(2, 2)) == "rock"
    assert grid.get(Coordinate(-2, -4)) == "rock"
    assert grid.get(Coordinate(-1, 0)) is None
    assert grid.wrapped(Coordinate(-1, -1)) == Coordinate(1, 1)


def test_grid_wrap_empty() -> None:
    grid: GridModel[str] = GridModel(width=0, height=0, wrap=True)
    assert grid.get(Coordinate(3, 4)) is None
    with pytest.raises(ValueError):
        grid.wrapped(Coordinate(3, 4))


def test_grid_find() -> None:
    grid = GridModel.from_string(".S\nS.\n", {"S": "start"})
    assert grid.find(lambda v: v == "start") == Coordinate(1, 0)
    assert grid.find_all(lambda v: v == "start") == [Coordinate(1, 0), Coordinate(0, 1)]
    assert grid.find(lambda v: v == "end") is None


def test_grid_to_string() -> None:
    text = "#..\n.O.\n"
    grid = GridModel.from_string(text, {"#": "rock", "O": "ball"})
    assert grid.to_string({"rock": "#", "ball": "O"}) == text
    assert list(grid.coordinates())[:4] == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0), Coordinate(0, 1)]
