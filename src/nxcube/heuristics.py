"""
Heuristics Tables Module - Corner pattern database for the search solvers.

The corner table maps every reachable 2x2x2 configuration (in normal
orientation) to its minimum number of quarter turns from solved. Any
nxnxn cube projects onto a 2x2x2 through its corners, so the table gives an
admissible lower bound for cubes of every size.
"""

import logging
import pickle
import time
from collections import deque
from operator import itemgetter
from pathlib import Path
from typing import Dict, Optional, Union

from .cube import CubeState, CubeInvariantError
from .cube.facelets import turn_permutation

logger = logging.getLogger(__name__)

# Every 2x2x2 state can be solved in 14 quarter turns or fewer
GODS_NUMBER_2X2X2 = 14

# Distinct 2x2x2 states up to whole-cube rotation
CORNER_STATE_COUNT = 3674160

PROGRESS_INTERVAL = 500000


class HeuristicsTables:
    """
    Precomputed lower bounds for the solvers.

    Built once and then only read, so a single instance can be shared by
    any number of solvers and worker threads.

    Attributes:
        corners: Canonical 2x2x2 key -> turns to solve, or None if not built
    """

    def __init__(self, corners: Optional[Dict[bytes, int]] = None):
        self.corners = corners

    @property
    def has_corners(self) -> bool:
        return self.corners is not None

    def __len__(self) -> int:
        return len(self.corners) if self.corners is not None else 0

    def calc_corner_heuristics_table(self) -> None:
        """
        Build the corner table by breadth-first search from solved.

        Only positive-index turns (U, L, F) are used. They never move the
        bottom back right cubie, which is the reference corner of the
        normal orientation, so every state reached is already canonical and
        the two faces of each slice are redundant.

        Raises:
            CubeInvariantError: If the search does not find exactly
                CORNER_STATE_COUNT states
        """
        start_time = time.perf_counter()
        solved = CubeState.std_solved_nxnxn(2)

        getters = []
        for turn in solved.all_turns():
            if turn.to_axis_based().index > 0:
                perm = turn_permutation(2, turn.face, turn.inv, turn.num_in)
                getters.append(itemgetter(*perm.tolist()))

        start = solved.canonical_key()
        table: Dict[bytes, int] = {start: 0}
        queue = deque([(start, 0)])
        processed = 0

        while queue:
            key, depth = queue.popleft()
            processed += 1
            if processed % PROGRESS_INTERVAL == 0:
                logger.debug(f"Corner table: {processed} states processed, depth {depth}")

            if depth >= GODS_NUMBER_2X2X2:
                continue

            for getter in getters:
                child = bytes(getter(key))
                if child not in table:
                    table[child] = depth + 1
                    queue.append((child, depth + 1))

        if len(table) != CORNER_STATE_COUNT:
            raise CubeInvariantError(
                f"Corner table has {len(table)} states, expected {CORNER_STATE_COUNT}"
            )

        self.corners = table
        elapsed = time.perf_counter() - start_time
        logger.info(f"Corner heuristics table built: {len(table)} states in {elapsed:.1f}s")

    def calc_edge_heuristics_table(self, edge_type: bool) -> None:
        raise NotImplementedError("Edge heuristics table is not implemented")

    def corner_heuristic(self, state: CubeState) -> Optional[int]:
        """
        Lower bound on the turns needed to solve state, from its corners.

        Args:
            state: Cube of any size

        Returns:
            Table distance, or None if there is no table or the corner
            configuration is not reachable by turns
        """
        if self.corners is None:
            return None
        projected = state if state.size() == 2 else state.from_corners_to_2x2x2()
        key = projected.find_canonical_key()
        if key is None:
            return None
        return self.corners.get(key)

    def save(self, path: Union[str, Path]) -> None:
        """Pickle the corner table to path."""
        if self.corners is None:
            raise ValueError("No corner table to save")
        with open(path, 'wb') as f:
            pickle.dump(self.corners, f, protocol=pickle.HIGHEST_PROTOCOL)
        logger.info(f"Corner heuristics table saved to {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'HeuristicsTables':
        """
        Load a table written by save().

        Raises:
            CubeInvariantError: If the file does not hold a complete table
        """
        with open(path, 'rb') as f:
            corners = pickle.load(f)
        if len(corners) != CORNER_STATE_COUNT:
            raise CubeInvariantError(
                f"Corner table at {path} has {len(corners)} states, expected {CORNER_STATE_COUNT}"
            )
        logger.info(f"Corner heuristics table loaded from {path}")
        return cls(corners)

    def __repr__(self):
        return f"HeuristicsTables(corners={self.has_corners})"
