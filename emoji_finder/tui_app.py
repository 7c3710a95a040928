# tui_app.py - Emoji Finder TUI Application
# -------------------------------------------------------
# Text based terminal UI around the EmojiFinder search core.
# Features:
#  - Live results as you type (the whole catalog for an empty query)
#  - Fixed-width emoji grid, navigate with the arrow keys
#  - DOWN from the search box jumps into the grid, UP on the top row jumps back
#  - ENTER picks the highlighted emoji (or the top result from the search box)
#  - Picked emoji goes to the clipboard or to stdout
#  - Result count, glyph name and latency in the status line
# -------------------------------------------------------

from __future__ import annotations

import logging
import time
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.coordinate import Coordinate
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Input, Static

from emoji_finder.core.grid import grid_rows, validate_columns
from emoji_finder.finder import EmojiFinder

logger = logging.getLogger(__name__)


class EmojiGrid(DataTable):
    """
    Emoji grid. One symbol per cell, no header.
    Moving up from the first row posts TopReached so the app can hand focus back.
    """

    class TopReached(Message):
        """Cursor tried to leave the grid through the top edge."""

    def action_cursor_up(self) -> None:
        if self.cursor_row <= 0:
            self.post_message(self.TopReached())
            return
        super().action_cursor_up()

    def redraw(self, rows: List[List[str]], columns: int) -> None:
        """Redraw with new rows, cursor back to the top-left cell."""
        self.clear(columns=True)
        self.add_columns(*(str(c) for c in range(columns)))
        self.add_rows(rows)
        if rows:
            self.move_cursor(row=0, column=0)


class StatusLine(Static):
    """
    Bottom readout: number of results, highlighted glyph, last query latency.
    """
    def set_status(self, count: int, seconds: float, detail: str = ""):
        ms = seconds * 1000
        parts = [f"[b]{count}[/b] results", f"[dim]{ms:.1f}ms[/dim]"]
        if detail:
            parts.insert(1, detail)
        self.update("  •  ".join(parts))


# Main Application -----------------------------------------------------------------
class EmojiFinderApp(App):
    """
    The main Textual app.
    Architecture:
     - input changes to search core (search + project)
     - grid assignment to grid redraw + status line
     - grid selection to output sink
    Exits with the picked symbol as return value (None when cancelled).
    """

    CSS = """
    #query { dock: top; }
    EmojiGrid { height: 1fr; }
    StatusLine { height: 1; padding: 0 1; }
    """

    BINDINGS = [
        ("down", "focus_grid", "Results"),
        ("escape", "quit", "Quit"),
    ]

    query_text = reactive("")  # whats currently in the search box

    def __init__(self, finder: EmojiFinder, columns: int = 10, output: str = "clipboard"):
        super().__init__()
        # caller bug, fail before the UI ever starts
        self.columns = validate_columns(columns)
        self.finder = finder
        self.output = output
        self.picked: Optional[str] = None
        self.results: List[str] = []  # most recent search result
        self.latency = 0.0

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search emoji…", id="query")
        yield EmojiGrid(id="grid", cursor_type="cell", show_header=False)
        yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.run_query("")
        self.query_one(Input).focus()

    # Querying --------------------------------------------------------------
    def run_query(self, query: str) -> None:
        start = time.perf_counter()
        result, assignment = self.finder.lookup(query, self.columns)
        self.latency = time.perf_counter() - start
        self.query_text = query
        self.results = result
        self.query_one(EmojiGrid).redraw(grid_rows(assignment, self.columns), self.columns)
        self._refresh_status()
        logger.debug("query %r -> %d results in %.4fs", query, len(result), self.latency)

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run the search every time the user types."""
        self.run_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """ENTER in the search box = pick the top result."""
        if self.results:
            self.pick(self.results[0])

    # Status -----------------------------------------------------------------
    def _refresh_status(self, symbol: str = "") -> None:
        detail = ""
        rec = self.finder.record_for(symbol) if symbol else None
        if rec is not None:
            detail = f"{rec.symbol} [i]{rec.name}[/i]"
        self.query_one(StatusLine).set_status(len(self.results), self.latency, detail)

    # Grid events -------------------------------------------------------------
    def on_data_table_cell_highlighted(self, event: DataTable.CellHighlighted) -> None:
        self._refresh_status(str(event.value or ""))

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        symbol = str(event.value or "")
        if symbol:
            self.pick(symbol)

    def on_emoji_grid_top_reached(self, event: EmojiGrid.TopReached) -> None:
        self.query_one(Input).focus()

    # Actions ----------------------------------------------------------------------
    def action_focus_grid(self) -> None:
        grid = self.query_one(EmojiGrid)
        if grid.row_count:
            grid.focus()

    def symbol_at(self, row: int, column: int) -> str:
        return str(self.query_one(EmojiGrid).get_cell_at(Coordinate(row, column)))

    # Picking --------------------------------------------------------------------
    def pick(self, symbol: str) -> None:
        """Deliver the symbol to the clipboard sink (stdout is handled after exit) and quit."""
        self.picked = symbol
        logger.info("picked %s (output=%s)", symbol, self.output)
        if self.output == "clipboard":
            self.copy_to_clipboard(symbol)
        self.exit(symbol)
