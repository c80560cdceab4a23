"""Keyboard input mapped to game actions."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any, Optional

import pygame


class Action(Enum):
    """Every action a player can take."""

    STAY_IDLE = auto()
    BACK = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SELECT = auto()
    DROP = auto()
    ROTATE = auto()
    HOLD = auto()
    PAUSE = auto()


_KEY_ACTIONS: dict[int, Action] = {
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_RETURN: Action.SELECT,
    pygame.K_SPACE: Action.DROP,
    pygame.K_q: Action.BACK,
    pygame.K_ESCAPE: Action.BACK,
    pygame.K_c: Action.HOLD,
    pygame.K_LSHIFT: Action.HOLD,
    pygame.K_x: Action.ROTATE,
    pygame.K_p: Action.PAUSE,
}


def action_for_key(key: int) -> Action:
    """The action bound to a key, or STAY_IDLE for unbound keys."""
    return _KEY_ACTIONS.get(key, Action.STAY_IDLE)


EventSource = Callable[[], Optional[Any]]


class InputManager:
    """Polls events one at a time and keeps the latest action."""

    def __init__(self, poll_event: EventSource | None = None) -> None:
        self._poll_event: EventSource = poll_event or pygame.event.poll
        self.action = Action.STAY_IDLE
        self.game_exiting = False

    def _next_event(self) -> Any | None:
        event = self._poll_event()
        if event is None or event.type == pygame.NOEVENT:
            return None
        return event

    def clear_event_queue(self) -> None:
        """Discard every pending event."""
        while self._next_event() is not None:
            pass

    def poll_action(self) -> bool:
        """Read one event and update the action; False once the queue is empty."""
        event = self._next_event()
        if event is None:
            self.action = Action.STAY_IDLE
            return False
        if event.type == pygame.QUIT:
            self.game_exiting = True
        elif event.type == pygame.KEYDOWN:
            self.action = action_for_key(event.key)
        else:
            self.action = Action.STAY_IDLE
        return True

    def set_exit(self) -> None:
        self.game_exiting = True