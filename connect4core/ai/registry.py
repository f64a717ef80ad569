"""
registry.py - Named lookup of AI strategies

Strategies are registered explicitly by name with a factory that builds one
for a given player. Drivers look strategies up by name (e.g. from a command
line flag) through create_ai().
"""

from typing import Any, Callable, Dict, List

from connect4core.ai.base import AI
from connect4core.ai.human import HumanAI
from connect4core.ai.random_ai import RandomAI
from connect4core.debug import debug
from connect4core.errors import InvalidArgumentError
from connect4core.game.player import Player

AIFactory = Callable[..., AI]

_REGISTRY: Dict[str, AIFactory] = {}


def register_ai(name: str, factory: AIFactory) -> None:
    """
    Register a strategy under a name.

    Args:
        name: Lookup name, e.g. "random"
        factory: Callable taking (player, **options) and returning an AI

    Raises:
        InvalidArgumentError: name is empty or already registered, or factory
            is not callable
    """
    if not name:
        raise InvalidArgumentError("AI name cannot be empty")
    if not callable(factory):
        raise InvalidArgumentError(f"Factory for '{name}' is not callable")
    if name in _REGISTRY:
        raise InvalidArgumentError(f"An AI named '{name}' is already registered")

    _REGISTRY[name] = factory
    debug.debug(f"Registered AI '{name}'", "ai")


def unregister_ai(name: str) -> None:
    """Remove a registered strategy. Unknown names are an error."""
    if name not in _REGISTRY:
        raise InvalidArgumentError(f"No AI named '{name}' is registered")
    del _REGISTRY[name]


def create_ai(name: str, player: Player, **options: Any) -> AI:
    """
    Build a registered strategy for a player.

    Args:
        name: Registered name
        player: Player the AI will move for
        **options: Passed through to the factory (e.g. seed=...)

    Returns:
        A new AI instance

    Raises:
        InvalidArgumentError: no AI is registered under name
    """
    factory = _REGISTRY.get(name)
    if factory is None:
        raise InvalidArgumentError(
            f"Unknown AI '{name}', expected one of: {', '.join(available_ais())}")
    return factory(player, **options)


def available_ais() -> List[str]:
    """Names of every registered strategy, sorted."""
    return sorted(_REGISTRY)


# Built-in strategies
register_ai("random", RandomAI)
register_ai("human", HumanAI)
