#!/usr/bin/env python
"""Find all the words on Boggle boards and print them with their scores.

Each board file starts with its dimensions, followed by its tiles:

    4 4
    A  T  E  E
    A  P  Y  O
    T  I  N  U
    E  D  S  E
"""

import argparse

from bogglesolver.args import add_standard_args, get_solver_from_args
from bogglesolver.board import Board


def main():
    parser = argparse.ArgumentParser(description="Find all the words on Boggle boards")
    add_standard_args(parser)
    parser.add_argument("boards", metavar="BOARD", nargs="+", help="Board files")
    args = parser.parse_args()

    solver = get_solver_from_args(args)
    for path in args.boards:
        board = Board.from_file(path)
        print(board, end="")
        total = 0
        for word in sorted(solver.all_valid_words(board)):
            points = solver.score_of(word)
            total += points
            print(f"{word}\t{points}")
        print(f"score: {total}")


if __name__ == "__main__":
    main()
