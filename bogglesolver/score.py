#!/usr/bin/env python
"""Score boggle boards.

Boards are given as one row-major string of letters per line, e.g.

$ echo perslatgsineters | python -m bogglesolver.score --size 44

or rolled at random:

$ python -m bogglesolver.score --size 44 --random 10000 --random_seed 808813
"""

import argparse
import fileinput
import random
import sys
import time

from tqdm import tqdm

from bogglesolver.args import add_standard_args, get_dims_from_args, get_solver_from_args
from bogglesolver.board import Board


def main():
    parser = argparse.ArgumentParser(description="Score boggle boards")
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing boards, or stdin"
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )
    parser.add_argument(
        "--random",
        type=int,
        default=0,
        metavar="N",
        help="Score N random boards instead of reading them.",
    )

    args = parser.parse_args()
    dims = get_dims_from_args(args)
    solver = get_solver_from_args(args)

    start_s = time.time()
    n = 0
    if args.random:
        rng = random.Random(args.random_seed if args.random_seed >= 0 else None)
        total_score = 0
        for _ in tqdm(range(args.random), smoothing=0):
            total_score += solver.score(Board.random(dims, rng))
            n += 1
        print(f"{total_score=}")
    else:
        for line in fileinput.input(files=args.files):
            letters = line.strip()
            if not letters:
                continue
            board = Board.from_letters(letters, dims)
            words = solver.all_valid_words(board)
            score = sum(solver.score_of(word) for word in words)
            print(f"{letters}: {score}")
            if args.print_words:
                print("\n".join(sorted(words)))
            n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0.0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
