"""
input_manager.py
----------------
Keyboard state tracking and steering intent sampling.

Provides:
- A process-wide held-key set fed by pygame KEYDOWN/KEYUP events
- Key identifiers independent of pygame key codes ("ArrowLeft", "a", "D", ...)
- A pure sampler reducing the held set to left/right intent
"""

from typing import Iterable, NamedTuple

import pygame

from comet_dodge.core.debug.debug_logger import DebugLogger
from comet_dodge.core.runtime.game_settings import Input


# ===========================================================
# Steering Intent
# ===========================================================

class MoveIntent(NamedTuple):
    """Horizontal steering requested this tick."""
    left: bool
    right: bool


def sample_direction(held_keys: Iterable[str],
                     left_keys=Input.LEFT_KEYS,
                     right_keys=Input.RIGHT_KEYS) -> MoveIntent:
    """
    Reduce a set of held key identifiers to steering intent.

    Args:
        held_keys: Identifiers of all keys currently down.
        left_keys: Aliases that steer left.
        right_keys: Aliases that steer right.

    Returns:
        MoveIntent: True for each side with at least one alias held.
    """
    held = held_keys if isinstance(held_keys, (set, frozenset)) else set(held_keys)
    return MoveIntent(
        left=not held.isdisjoint(left_keys),
        right=not held.isdisjoint(right_keys),
    )


# ===========================================================
# Key Identifiers
# ===========================================================

NAMED_KEYS = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_RETURN: "Enter",
    pygame.K_SPACE: " ",
    pygame.K_ESCAPE: "Escape",
}


def key_identifier(event) -> str:
    """Map a pygame key event to an identifier string."""
    named = NAMED_KEYS.get(event.key)
    if named:
        return named
    # Ctrl+letter reports a control character as text
    text = getattr(event, "unicode", "")
    if text and text.isprintable():
        return text
    return pygame.key.name(event.key)


class InputManager:
    """
    Owner of the held-key set.

    The set is created empty when the manager is built and is only changed
    by key events; session restarts do not clear it.
    """

    def __init__(self):
        DebugLogger.init_entry("InputManager")
        self.held_keys = set()
        # Identifier recorded at key-down, so key-up removes the same entry
        # even if modifiers changed in between.
        self._down_identifiers = {}

    def handle_event(self, event) -> bool:
        """
        Update the held set from a pygame event.

        Returns:
            bool: True if the event was a key event and was consumed.
        """
        if event.type == pygame.KEYDOWN:
            identifier = key_identifier(event)
            self._down_identifiers[event.key] = identifier
            self.held_keys.add(identifier)
            DebugLogger.trace(f"Key down: {identifier!r}", category="input")
            return True

        if event.type == pygame.KEYUP:
            identifier = self._down_identifiers.pop(event.key, None)
            if identifier is None:
                identifier = key_identifier(event)
            self.held_keys.discard(identifier)
            DebugLogger.trace(f"Key up: {identifier!r}", category="input")
            return True

        return False

    def press(self, identifier: str):
        """Mark a key identifier as held without a pygame event."""
        self.held_keys.add(identifier)

    def release(self, identifier: str):
        """Mark a key identifier as released."""
        self.held_keys.discard(identifier)

    def intent(self) -> MoveIntent:
        """Steering intent for the current held set."""
        return sample_direction(self.held_keys)
