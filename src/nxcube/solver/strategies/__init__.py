"""
Strategies Package - Concrete search strategies.

Import this module to register all built-in strategies.
"""

from .dpll import DpllStrategy
from .idastar import IdaStarStrategy, SearchNode
from .table_walk import TableWalkStrategy

__all__ = [
    "DpllStrategy",
    "IdaStarStrategy",
    "SearchNode",
    "TableWalkStrategy",
]
