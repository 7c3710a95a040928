# emoji_finder/core/grid.py
# Grid projector: lays a final result list out row-major on a fixed number of columns.
# No row limit here, scrolling/truncation belongs to the renderer.

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .errors import ConfigurationError

Position = Tuple[int, int]  # (row, column)
GridAssignment = Dict[Position, str]


def validate_columns(columns) -> int:
    """Return `columns` if it is an int >= 1, otherwise raise ConfigurationError."""
    if isinstance(columns, bool) or not isinstance(columns, int):
        raise ConfigurationError(f"columns must be an integer, got {columns!r}")
    if columns < 1:
        raise ConfigurationError(f"columns must be >= 1, got {columns}")
    return columns


def project(result: Sequence[str], columns: int) -> GridAssignment:
    """i-th symbol -> (i // columns, i % columns). No filtering, no dedupe."""
    validate_columns(columns)
    return {divmod(i, columns): sym for i, sym in enumerate(result)}


def grid_rows(assignment: GridAssignment, columns: int) -> List[List[str]]:
    """
    Turn an assignment back into row lists for table renderers.
    Cells with no symbol (end of the last row) are "".
    """
    validate_columns(columns)
    if not assignment:
        return []
    n_rows = max(r for r, _ in assignment) + 1
    return [[assignment.get((r, c), "") for c in range(columns)] for r in range(n_rows)]
