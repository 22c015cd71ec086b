"""
Move Module - An ordered sequence of turns.
"""

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .turn import Face, FaceTurn, Turn


@dataclass
class Move:
    """
    Ordered list of turns, all for the same cube size.

    Composition is concatenation: ``m1 * m2`` does m1 first, then m2.
    ``m * m.invert()`` and ``m.invert() * m`` are both the identity.

    Attributes:
        turns: Turns in the order they are applied
    """
    turns: List[Turn] = field(default_factory=list)

    @classmethod
    def empty(cls) -> 'Move':
        return cls([])

    @classmethod
    def rnd_move(cls, n: int, num_turns: int,
                 rng: Optional[random.Random] = None) -> 'Move':
        """
        Create a random move for an nxnxn cube.

        Each turn is drawn uniformly over face, direction and depth.

        Args:
            n: Cube size
            num_turns: Number of turns in the move
            rng: Random generator (module level random if None)

        Returns:
            Random Move
        """
        rng = rng or random
        turns: List[Turn] = []
        for _ in range(num_turns):
            face = Face(rng.randrange(6))
            inv = rng.random() < 0.5
            num_in = rng.randrange(n // 2)
            turns.append(FaceTurn(face, inv, num_in, n))
        return cls(turns)

    def invert(self) -> 'Move':
        """Reverse the turn order and invert each turn."""
        return Move([turn.invert() for turn in reversed(self.turns)])

    def append(self, other: 'Move') -> None:
        """Append another move in place (order matters)."""
        self.turns.extend(other.turns)

    def push(self, turn: Turn) -> None:
        self.turns.append(turn)

    def copy(self) -> 'Move':
        return Move(list(self.turns))

    def is_next_turn_efficient(self, next_turn: Turn) -> bool:
        """
        Check whether appending next_turn is worth exploring.

        The turn is rejected when:
        - it is the inverse of the last turn
        - it would be the third identical turn in a row
        - it commutes with the last turn and breaks the order
          U->D, L->R, F->B (larger axis index first)

        These rules try to make every search branch reach a different cube
        configuration. They are a pruning heuristic, not a proof that no
        shortest solution is discarded.

        Args:
            next_turn: Candidate turn

        Returns:
            True if the turn should be explored
        """
        if not self.turns:
            return True

        last_turn = self.turns[-1]
        if last_turn.invert() == next_turn:
            return False

        if len(self.turns) > 1 and self.turns[-2] == last_turn and last_turn == next_turn:
            return False

        if next_turn.commutes_with(last_turn):
            return next_turn.to_axis_based().index <= last_turn.to_axis_based().index

        return True

    def resize_hold_center(self, new_cube_size: int) -> 'Move':
        """
        Re-target every turn to another cube size keeping its axis index.

        Turns that can not exist on the new size are dropped.
        """
        resized = (t.resize_hold_center(new_cube_size) for t in self.turns)
        return Move([t for t in resized if t is not None])

    def resize_hold_face(self, new_cube_size: int) -> 'Move':
        """
        Re-target every turn to another cube size keeping its depth.

        Turns that can not exist on the new size are dropped.
        """
        resized = (t.resize_hold_face(new_cube_size) for t in self.turns)
        return Move([t for t in resized if t is not None])

    def __mul__(self, other: 'Move') -> 'Move':
        return Move(self.turns + other.turns)

    def __imul__(self, other: 'Move') -> 'Move':
        self.append(other)
        return self

    def __len__(self) -> int:
        return len(self.turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.turns)

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.turns == other.turns

    def __str__(self):
        return "(" + ", ".join(str(t.to_face_based()) for t in self.turns) + ")"
