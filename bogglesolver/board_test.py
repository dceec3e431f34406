from random import Random

import pytest
from inline_snapshot import snapshot

from bogglesolver.board import Board, parse_tile, spell
from bogglesolver.dice import DICE, roll_dice


def test_parse_tile():
    assert parse_tile("a") == "A"
    assert parse_tile("Z") == "Z"
    assert parse_tile("Qu") == "Q"
    assert parse_tile("QU") == "Q"
    assert parse_tile("q") == "Q"
    for bad in ["", "1", "AB", "QX", "ü"]:
        with pytest.raises(ValueError):
            parse_tile(bad)


def test_spell():
    assert spell("A") == "A"
    assert spell("Q") == "QU"


def test_from_letters():
    # P E R S
    # L A T G
    # S I N E
    # T E R S
    board = Board.from_letters("perslatgsineters", (4, 4))
    assert board.dims == (4, 4)
    assert board.letter(0, 0) == "P"
    assert board.letter(0, 3) == "S"
    assert board.letter(1, 0) == "L"
    assert board.letter(3, 3) == "S"
    assert board.letters() == "perslatgsineters"

    with pytest.raises(IndexError):
        board.letter(4, 0)
    with pytest.raises(ValueError):
        Board.from_letters("abc", (2, 2))


def test_non_square():
    board = Board.from_letters("dnisetalsrep", (3, 4))
    assert board.rows == 3
    assert board.cols == 4
    assert board.letter(1, 0) == "E"
    assert board.letter(2, 3) == "P"


def test_bad_boards():
    with pytest.raises(ValueError):
        Board([])
    with pytest.raises(ValueError):
        Board([[]])
    with pytest.raises(ValueError):
        Board(["ab", "c"])
    with pytest.raises(ValueError):
        Board(["a1", "cd"])


def test_from_file():
    board = Board.from_file("testdata/board-q.txt")
    assert board.dims == (3, 3)
    assert board.letter(0, 0) == "Q"
    assert board.letters() == "qitesandr"
    assert str(board) == snapshot(
        """\
3 3
Qu I  T
E  S  A
N  D  R
"""
    )
    assert Board.parse(str(board)) == board


def test_parse_errors():
    with pytest.raises(ValueError):
        Board.parse("")
    with pytest.raises(ValueError):
        Board.parse("x 2 A B C D")
    with pytest.raises(ValueError):
        Board.parse("2 2 A B C")
    with pytest.raises(ValueError):
        Board.parse("2 2 A B C D E")


def test_equality():
    a = Board.from_letters("abcd", (2, 2))
    assert a == Board([["A", "B"], ["C", "D"]])
    assert a != Board.from_letters("abcd", (1, 4))
    assert len({a, Board.from_letters("abcd", (2, 2))}) == 1
    assert repr(a) == "Board.from_letters('abcd', (2, 2))"


def test_roll_dice():
    letters = roll_dice(Random(0))
    assert len(letters) == 16
    # Every die is used exactly once, in shuffled order.
    dice = [*DICE]
    Random(0).shuffle(dice)
    for let, die in zip(letters, dice):
        assert let in die


def test_random():
    board = Board.random((4, 4), Random(808813))
    assert board.dims == (4, 4)
    assert board == Board.random((4, 4), Random(808813))

    board = Board.random((3, 5), Random(1))
    assert board.dims == (3, 5)
    assert all("A" <= let <= "Z" for let in board.cells)
