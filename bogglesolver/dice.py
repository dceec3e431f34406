"""Letter sources for random boards.

A 4x4 board is rolled with real Boggle dice. Other shapes have no standard
dice, so their letters are drawn by English letter frequency.
"""

from random import Random

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008. The "Q" face is the "Qu" tile.
DICE = [
    "AAEEGN",
    "ACHOPS",
    "AFFKPS",
    "ABBJOO",
    "CIIMOT",
    "DELRVY",
    "DEILRX",
    "EEINSU",
    "EEGHNW",
    "HLNNRZ",
    "DISTTY",
    "AOOTTW",
    "ELRTTY",
    "EIOSST",
    "EHRTUV",
    "HIMNQU",
]

DICE_DIMS = (4, 4)

# Relative frequency of each letter A-Z in English text.
LETTER_FREQUENCIES = [
    0.08167, 0.01492, 0.02782, 0.04253, 0.12703, 0.02228,
    0.02015, 0.06094, 0.06966, 0.00153, 0.00772, 0.04025,
    0.02406, 0.06749, 0.07507, 0.01929, 0.00095, 0.05987,
    0.06327, 0.09056, 0.02758, 0.00978, 0.02360, 0.00150,
    0.01974, 0.00074,
]  # fmt: skip
assert len(LETTER_FREQUENCIES) == 26

A_TO_Z = [chr(ord("A") + i) for i in range(26)]


def roll_dice(rng: Random) -> list[str]:
    """Shake the dice into the grid and read the face of each one."""
    dice = [*DICE]
    rng.shuffle(dice)
    return [rng.choice(die) for die in dice]


def random_letters(n: int, rng: Random) -> list[str]:
    return rng.choices(A_TO_Z, weights=LETTER_FREQUENCIES, k=n)
