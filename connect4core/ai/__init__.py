"""
connect4core/ai/__init__.py - Move-choosing strategies

This package defines the AI interface, the bundled strategies and the
registry used to create them by name.
"""

from connect4core.ai.base import AI
from connect4core.ai.random_ai import RandomAI
from connect4core.ai.human import HumanAI
from connect4core.ai.registry import available_ais, create_ai, register_ai, unregister_ai

__all__ = ['AI', 'RandomAI', 'HumanAI', 'available_ais', 'create_ai',
           'register_ai', 'unregister_ai']
