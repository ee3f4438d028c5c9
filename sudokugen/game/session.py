"""Interactive play state: current grid, pencil marks and undo/redo history."""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

import numpy as np

from ..bank import PuzzleBank
from ..core.board import SudokuBoard, SIZE
from ..core.validator import Conflicts, GridLike, find_conflicts, validate_solution
from ..generator import Difficulty, generate_puzzle

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(frozen=True)
class HistoryEntry:
    """One player action on a single cell, replayable in both directions."""
    row: int
    col: int
    old_value: int
    new_value: int
    old_marks: FrozenSet[int]
    new_marks: FrozenSet[int]
    is_pencil: bool


class GameSession:
    """
    State of one game in progress.

    The puzzle the game started from is kept untouched in ``initial``; all
    edits go to ``current``. Every edit is recorded as a HistoryEntry so it
    can be undone and redone.
    """

    def __init__(self, puzzle: GridLike):
        """
        Start a session on a puzzle.

        Args:
            puzzle: A SudokuBoard or 9x9 nested list, 0 for empty cells.
        """
        if isinstance(puzzle, SudokuBoard):
            self.initial = puzzle.copy()
        else:
            self.initial = SudokuBoard.from_2d_list(puzzle)

        self.current = self.initial.copy()
        self.prefilled: FrozenSet[Position] = frozenset(
            (r, c) for r in range(SIZE) for c in range(SIZE) if not self.initial.is_empty(r, c)
        )
        self.selected_number: Optional[int] = None
        self.pencil_mode = False
        self.pencil_marks: Dict[Position, FrozenSet[int]] = {}
        self.history: List[HistoryEntry] = []
        self.redo_stack: List[HistoryEntry] = []

    @classmethod
    def new_game(
        cls,
        difficulty: Union[Difficulty, str],
        source: Optional[PuzzleBank] = None,
        rng: Optional[random.Random] = None,
    ) -> GameSession:
        """
        Start a game at the given difficulty.

        Args:
            difficulty: Difficulty tier.
            source: Bank to draw a pregenerated puzzle from. Without one, a
                fresh puzzle is generated.
            rng: Optional random source.
        """
        difficulty = Difficulty.parse(difficulty)
        if source is not None:
            puzzle = source.random_puzzle(difficulty, rng=rng)
        else:
            puzzle = generate_puzzle(difficulty, rng=rng)
        logger.info("Starting new %s game", difficulty.value)
        return cls(puzzle)

    @property
    def has_progress(self) -> bool:
        """True once the player has made a move worth confirming before discarding."""
        return bool(self.history)

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def marks(self, row: int, col: int) -> FrozenSet[int]:
        """Pencil marks in a cell."""
        return self.pencil_marks.get((row, col), frozenset())

    def select_number(self, num: int) -> bool:
        """
        Select the number that cell clicks will place or mark.

        Returns:
            False if the number is already placed nine times and so cannot
            be selected.
        """
        if num < 1 or num > SIZE:
            raise ValueError(f"Number must be 1-{SIZE}, got {num}")
        if num in self.completed_numbers():
            return False
        self.selected_number = num
        return True

    def toggle_pencil_mode(self) -> bool:
        """Switch between placing values and editing pencil marks."""
        self.pencil_mode = not self.pencil_mode
        return self.pencil_mode

    def click_cell(self, row: int, col: int) -> Optional[HistoryEntry]:
        """
        Apply the selected number to a cell.

        In pencil mode the number is toggled in the cell's marks (filled
        cells are left alone). Otherwise the number is placed, or removed if
        the cell already holds it; placing clears the cell's marks and drops
        the number from the marks of every peer cell.

        Returns:
            The recorded HistoryEntry, or None if the click did nothing.

        Raises:
            ValueError: If (row, col) is outside the grid.
        """
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Cell ({row}, {col}) is outside the grid")
        if self.selected_number is None or (row, col) in self.prefilled:
            return None

        num = self.selected_number
        value = self.current.get(row, col)
        old_marks = self.marks(row, col)

        if self.pencil_mode:
            if value != 0:
                return None
            new_marks = old_marks ^ {num}
            entry = HistoryEntry(row, col, value, value, old_marks, frozenset(new_marks), True)
            self._set_marks((row, col), entry.new_marks)
        else:
            new_value = 0 if value == num else num
            entry = HistoryEntry(row, col, value, new_value, old_marks, frozenset(), False)
            self.current.set(row, col, new_value)
            self._set_marks((row, col), frozenset())
            if new_value != 0:
                self._remove_peer_marks(row, col, new_value)

        self.history.append(entry)
        self.redo_stack.clear()
        self._release_completed_number()
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        """Revert the last action. Returns it, or None if there is nothing to undo."""
        if not self.history:
            return None
        entry = self.history.pop()
        self.redo_stack.append(entry)
        self._apply(entry.row, entry.col, entry.old_value, entry.old_marks)
        return entry

    def redo(self) -> Optional[HistoryEntry]:
        """Reapply the last undone action. Returns it, or None if there is nothing to redo."""
        if not self.redo_stack:
            return None
        entry = self.redo_stack.pop()
        self.history.append(entry)
        self._apply(entry.row, entry.col, entry.new_value, entry.new_marks)
        return entry

    def reset(self) -> None:
        """Return to the starting puzzle, discarding all edits and history."""
        self.current = self.initial.copy()
        self.selected_number = None
        self.pencil_mode = False
        self.pencil_marks = {}
        self.history = []
        self.redo_stack = []

    def number_counts(self) -> Dict[int, int]:
        """How many times each number 1-9 appears on the current grid."""
        counts = np.bincount(self.current.grid.flatten(), minlength=SIZE + 1)
        return {num: int(counts[num]) for num in range(1, SIZE + 1)}

    def completed_numbers(self) -> FrozenSet[int]:
        """Numbers already placed nine times."""
        return frozenset(num for num, n in self.number_counts().items() if n >= SIZE)

    def conflicts(self) -> Conflicts:
        """Rows, columns and boxes of the current grid holding a duplicate."""
        return find_conflicts(self.current)

    def highlighted_cells(self) -> FrozenSet[Position]:
        """Cells whose value matches the selected number."""
        if self.selected_number is None:
            return frozenset()
        rows, cols = np.nonzero(self.current.grid == self.selected_number)
        return frozenset((int(r), int(c)) for r, c in zip(rows, cols))

    def highlighted_marks(self) -> FrozenSet[Position]:
        """Cells whose pencil marks include the selected number."""
        if self.selected_number is None:
            return frozenset()
        return frozenset(
            pos for pos, marks in self.pencil_marks.items() if self.selected_number in marks
        )

    def is_solved(self) -> bool:
        """True when the grid is complete, conflict-free and keeps every clue."""
        return validate_solution(self.initial, self.current)

    def _apply(self, row: int, col: int, value: int, marks: FrozenSet[int]) -> None:
        self.current.set(row, col, value)
        self._set_marks((row, col), marks)
        self._release_completed_number()

    def _set_marks(self, pos: Position, marks: FrozenSet[int]) -> None:
        if marks:
            self.pencil_marks[pos] = marks
        else:
            self.pencil_marks.pop(pos, None)

    def _remove_peer_marks(self, row: int, col: int, num: int) -> None:
        for pos in self.current.get_peers(row, col):
            marks = self.pencil_marks.get(pos)
            if marks and num in marks:
                self._set_marks(pos, marks - {num})

    def _release_completed_number(self) -> None:
        if self.selected_number in self.completed_numbers():
            self.selected_number = None

    def __str__(self) -> str:
        return str(self.current)
