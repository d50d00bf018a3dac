"""
Timeline Interaction

Pointer, touch and wheel handling.
"""

from .state_machine import InteractionStateMachine

__all__ = [
    'InteractionStateMachine',
]
