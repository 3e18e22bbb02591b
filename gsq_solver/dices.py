"""
Genius Square dice definitions.

The game has 7 six-faced dice. Each face names one board cell, and
the faces were chosen so that every roll can be solved. Some dice
repeat a face (the last die only ever shows F1 or A6).

No cell appears on more than one die, so a roll always gives 7
distinct blockers.
"""

import itertools
import random
from dataclasses import dataclass
from math import prod
from typing import Iterator

from .config import DIE_FACES
from .conversion_utils import mask_to_cells, parse


@dataclass(frozen=True)
class Die:
    """One physical die: six face masks, in printed order."""
    faces: tuple[int, ...]

    def __post_init__(self):
        if len(self.faces) != DIE_FACES:
            raise ValueError(f"A die needs {DIE_FACES} faces, got {len(self.faces)}")

    @classmethod
    def from_cells(cls, spec: str) -> "Die":
        """Build a die from six space separated cell names."""
        faces = []
        for name in spec.split():
            face = parse(name)
            if face == 0:
                raise ValueError(f"Bad die face: \"{name}\"")
            faces.append(face)
        return cls(tuple(faces))

    def roll(self, rng: random.Random = random) -> int:
        """Pick one face uniformly at random."""
        return rng.choice(self.faces)

    def distinct_faces(self) -> list[int]:
        """Faces with duplicates removed, first-seen order kept."""
        return list(dict.fromkeys(self.faces))

    def cells(self) -> list[str]:
        return [mask_to_cells(face)[0] for face in self.faces]


# Dice values, per https://www.reddit.com/r/boardgames/comments/kxt1q3/comment/gjc5m2n/
ALL_DICE = [
    Die.from_cells("A1 C1 D1 D2 E2 F3"),
    Die.from_cells("A2 B2 C2 A3 B1 B3"),
    Die.from_cells("C3 D3 E3 B4 C4 D4"),
    Die.from_cells("E1 F2 F2 B6 A5 A5"),
    Die.from_cells("A4 B5 C6 C5 D6 F6"),
    Die.from_cells("E4 F4 E5 F5 D5 E6"),
    Die.from_cells("F1 F1 F1 A6 A6 A6"),
]


def random_blockers(rng: random.Random = random, dice: list[Die] = ALL_DICE) -> int:
    """Roll all dice and return the combined blocker mask."""
    used = 0
    for die in dice:
        face = die.roll(rng)
        assert used & face == 0, "dice faces overlap"
        used |= face
    assert is_valid_roll(used, dice)
    return used


def is_valid_roll(blockers: int, dice: list[Die] = ALL_DICE) -> bool:
    """True if every die has a face among the blockers.

    A plausibility check only: it does not try to assign faces to dice.
    """
    return all(
        any(blockers & face == face for face in die.faces)
        for die in dice
    )


def fixed_roll(dice: list[Die] = ALL_DICE) -> int:
    """A fixed roll for testing (first face of each die)."""
    blockers = 0
    for die in dice:
        blockers |= die.faces[0]
    return blockers


def iter_all_rolls(dice: list[Die] = ALL_DICE) -> Iterator[int]:
    """Every distinct roll: one distinct face per die, nested in die order."""
    for faces in itertools.product(*(die.distinct_faces() for die in dice)):
        blockers = 0
        for face in faces:
            blockers |= face
        yield blockers


def count_all_rolls(dice: list[Die] = ALL_DICE) -> int:
    return prod(len(die.distinct_faces()) for die in dice)


# Some specific test cases
TEST_ROLLS = [
    # First faces
    ["A1", "A2", "C3", "E1", "A4", "E4", "F1"],
    # From the game's instructions
    ["C4", "B1", "E5", "A6", "D2", "C5", "A5"],
    # Last faces
    ["F3", "B3", "D4", "A5", "F6", "E6", "A6"],
]


if __name__ == "__main__":
    print("Fixed roll:", mask_to_cells(fixed_roll()))
    print("Random roll:", mask_to_cells(random_blockers()))
    print(f"Distinct rolls: {count_all_rolls()}")
    print()
    print("Test rolls:")
    for i, roll in enumerate(TEST_ROLLS):
        print(f"  Test {i+1}: {roll}")
