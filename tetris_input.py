"""Key mapping: directional keys to state transitions"""
import pygame
from tetris_state import GameState, move, rotate, soft_drop

KEY_NAMES = {
    pygame.K_LEFT: "Left",
    pygame.K_RIGHT: "Right",
    pygame.K_UP: "Up",
    pygame.K_DOWN: "Down",
}

ACTIONS = {
    "Left": lambda s: move(s, -1),
    "Right": lambda s: move(s, 1),
    "Up": rotate,
    "Down": soft_drop,
}

def handle_key(state: GameState, key: str) -> bool:
    """Apply a named key. Returns True if the state changed."""
    action = ACTIONS.get(key)
    if action is None: return False
    return action(state)
