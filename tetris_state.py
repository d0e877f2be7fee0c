"""Game state and transitions: spawn, step, move, rotate, soft drop"""
import logging
from dataclasses import dataclass, field
from typing import Optional
from tetris_board import Board, new_board, is_valid, lock, clear_lines, line_score
from tetris_piece import Piece, rotate_cw
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)

@dataclass
class GameState:
    board: Board = field(default_factory=new_board)
    current: Optional[Piece] = None
    next_type: str = ""
    score: int = 0
    game_over: bool = False
    drop_counter: float = 0
    last_time: Optional[float] = None
    frame_handle: Optional[int] = None

    @property
    def running(self) -> bool:
        return not self.game_over and self.current is not None


def new_game(rng: PieceRandom, board: Optional[Board] = None) -> GameState:
    """Fresh state with the first piece spawned and the next one queued."""
    state = GameState(board=board if board is not None else new_board())
    state.next_type = rng.next_piece()
    spawn_next(state, rng)
    logger.info("new game: first piece %s, next %s", state.current.t, state.next_type)
    return state


def spawn_next(state: GameState, rng: PieceRandom) -> bool:
    """Promote the queued type to the active piece and queue a new one.

    Returns False and flags game over when the fresh piece does not fit.
    """
    cols = len(state.board[0])
    state.current = Piece.spawn(state.next_type, cols)
    state.next_type = rng.next_piece()
    logger.debug("spawned %s at x=%d, next %s", state.current.t, state.current.x, state.next_type)
    p = state.current
    if not is_valid(state.board, p.shape, p.x, p.y):
        state.game_over = True
        logger.info("game over: %s does not fit at spawn, score %d", p.t, state.score)
        return False
    return True


def step(state: GameState, rng: PieceRandom) -> None:
    """One gravity tick: fall a row, or lock, clear, score and respawn."""
    if not state.running: return
    p = state.current
    if is_valid(state.board, p.shape, p.x, p.y+1):
        p.y += 1
    else:
        lock(state.board, p)
        cleared = clear_lines(state.board)
        state.score += line_score(cleared)
        spawn_next(state, rng)
    state.drop_counter = 0


def move(state: GameState, dx: int) -> bool:
    if not state.running: return False
    p = state.current
    if is_valid(state.board, p.shape, p.x+dx, p.y):
        p.x += dx
        return True
    return False


def rotate(state: GameState) -> bool:
    if not state.running: return False
    p = state.current
    ns = rotate_cw(p.shape)
    if is_valid(state.board, ns, p.x, p.y):
        p.shape = ns
        return True
    return False


def soft_drop(state: GameState) -> bool:
    """Move down a row and restart the gravity timer."""
    if not state.running: return False
    p = state.current
    if is_valid(state.board, p.shape, p.x, p.y+1):
        p.y += 1
        state.drop_counter = 0
        return True
    return False
