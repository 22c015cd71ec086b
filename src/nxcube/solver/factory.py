"""
Strategy Factory Module - Registry and factory for search strategies.
"""

from typing import Any, Dict, List, Type

from .base import SolverStrategy

DEFAULT_STRATEGY = "dpll"

# Registered search strategies by name
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class under cls.name.

    Usage:
        @register_strategy
        class DpllStrategy(SolverStrategy):
            name = "dpll"
            ...
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name ("dpll", "idastar", "table2x2")
        **kwargs: Passed to the strategy constructor (e.g. heuristics=...)

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of every registered strategy."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """DEFAULT_STRATEGY if registered, else the first registered name."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
