"""
nxcube - Solver for nxnxn Rubik's cubes.

Packages:
    - nxcube.cube: Cube model (turns, moves, facelet states)
    - nxcube.heuristics: Corner pattern database
    - nxcube.solver: Search strategies and the RubiksCubeSolver facade
"""

__version__ = "0.1.0"
