"""Standard command-line arguments shared across tools."""

import argparse

from bogglesolver.solver import BoardSolver
from bogglesolver.trie import load_dictionary


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--size",
        type=int,
        choices=(22, 23, 33, 34, 44, 45, 55),
        default=44,
        help="Size of the boggle board, as rows then columns.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dims_from_args(args: argparse.Namespace) -> tuple[int, int]:
    return args.size // 10, args.size % 10


def get_solver_from_args(args: argparse.Namespace) -> BoardSolver:
    return BoardSolver(load_dictionary(args.dictionary))
