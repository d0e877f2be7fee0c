"""Frame scheduler and the Running/GameOver game loop"""
import itertools
import logging
from typing import Callable, Dict, Optional
from tetris_config import CONFIG
from tetris_input import handle_key
from tetris_rng import PieceRandom
from tetris_state import GameState, new_game, step

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]

class FrameScheduler:
    """Per-frame callback queue driven by the host's frame pump.

    Callbacks requested while ``run`` is executing wait for the next call,
    so a self-rescheduling loop advances exactly once per host frame.
    """
    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, FrameCallback] = {}
        self._batch: Dict[int, FrameCallback] = {}

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._pending.pop(handle, None)
            self._batch.pop(handle, None)

    def pending(self) -> int:
        return len(self._pending)

    def run(self, now: float) -> None:
        self._batch, self._pending = self._pending, {}
        while self._batch:
            handle = next(iter(self._batch))
            self._batch.pop(handle)(now)


class GameLoop:
    """Owns the GameState and ties gravity, input and rendering together.

    ``renderer`` is optional; without one the state still advances.
    """
    def __init__(self, scheduler: FrameScheduler, rng: PieceRandom, renderer=None):
        self.scheduler = scheduler
        self.rng = rng
        self.renderer = renderer
        self.state: Optional[GameState] = None

    def start(self) -> None:
        self.restart()

    def restart(self) -> None:
        if self.state is not None:
            self.scheduler.cancel(self.state.frame_handle)
            self.state.frame_handle = None
        self.state = new_game(self.rng)
        self._show_score()
        if self.renderer: self.renderer.show_game_over(False)
        if self.state.game_over:
            self._enter_game_over()
            return
        self.state.frame_handle = self.scheduler.request(self.frame)

    def frame(self, now: float) -> None:
        s = self.state
        if s.game_over:
            self.scheduler.cancel(s.frame_handle)
            s.frame_handle = None
            return
        delta = 0 if s.last_time is None else now - s.last_time
        s.last_time = now
        s.drop_counter += delta
        if s.drop_counter > CONFIG["DROP_INTERVAL_MS"]:
            score = s.score
            step(s, self.rng)
            if s.score != score: self._show_score()
            if s.game_over:
                self._enter_game_over()
                return
        self._draw()
        s.frame_handle = self.scheduler.request(self.frame)

    def handle_key(self, key: str) -> bool:
        if self.state is None: return False
        moved = handle_key(self.state, key)
        if moved: self._draw()
        return moved

    def _enter_game_over(self):
        self.state.frame_handle = None
        if self.renderer: self.renderer.show_game_over(True)
        self._draw()

    def _show_score(self):
        if self.renderer: self.renderer.show_score(self.state.score)

    def _draw(self):
        if self.renderer: self.renderer.draw(self.state)
