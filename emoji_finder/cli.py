"""
cli.py - command line entry point for Emoji Finder
Features:
- `pick` (default): interactive TUI, picked emoji goes to the clipboard or stdout
- `search QUERY`: print the result grid once, as a Rich table
- `config [KEY VALUE]`: show or change persistent settings
- Uses Rich for tables and error output
"""

import argparse
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from emoji_finder.core.errors import ConfigurationError, ParseError
from emoji_finder.core.grid import grid_rows, validate_columns
from emoji_finder.core.ranking import RANKINGS, get_ranking
from emoji_finder.finder import EmojiFinder
from emoji_finder.utils.cache_utils import timed
from emoji_finder.utils.config_manager import Config
from emoji_finder.utils.logger_utils import LEVELS, setup_logging

# initialise consoles for rich output
console = Console()
err_console = Console(stderr=True)

EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-finder", description="Find emoji by keyword.")
    parser.add_argument("--config", help="config file (default: ~/.config/emoji_finder/config.json)")
    parser.add_argument("--dataset", help="JSON dataset to load instead of the bundled one")
    parser.add_argument("--ranking", choices=sorted(RANKINGS), help="result ordering")
    parser.add_argument("--columns", type=int, help="grid width")
    parser.add_argument("--stdout", action="store_true", help="print the picked emoji instead of copying it")
    parser.add_argument("--log-level", type=str.upper, choices=LEVELS, help="logging verbosity")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("pick", help="interactive picker (default)")

    p_search = sub.add_parser("search", help="print matching emoji as a grid")
    p_search.add_argument("query", nargs="?", default="", help="substring to look for")

    p_cfg = sub.add_parser("config", help="show or set config values")
    p_cfg.add_argument("key", nargs="?")
    p_cfg.add_argument("value", nargs="?")
    return parser


def _make_finder(cfg: Config, args) -> EmojiFinder:
    ranking = get_ranking(args.ranking or cfg["ranking"])
    dataset = args.dataset or cfg["dataset"]
    if dataset:
        return EmojiFinder.from_path(dataset, ranking=ranking, cache_size=cfg["cache_size"])
    return EmojiFinder.bundled(ranking=ranking, cache_size=cfg["cache_size"])


# COMMANDS -----------------------------------------------------------------------
def cmd_search(finder: EmojiFinder, query: str, columns: int) -> int:
    (result, assignment), dt = timed(finder.lookup)(query, columns)
    if not result:
        console.print(f"[yellow]no emoji match[/yellow] {escape(repr(query))}")
        return 0

    table = Table(box=box.SIMPLE, show_header=False)
    for _ in range(columns):
        table.add_column(justify="center")
    for row in grid_rows(assignment, columns):
        table.add_row(*row)
    console.print(table)
    console.print(f"[dim]{len(result)} results in {dt * 1000:.2f} ms[/dim]")
    return 0


def cmd_pick(finder: EmojiFinder, columns: int, output: str) -> int:
    # imported here so `search`/`config` don't pay for textual startup
    from emoji_finder.tui_app import EmojiFinderApp

    symbol = EmojiFinderApp(finder, columns=columns, output=output).run()
    if symbol and output == "stdout":
        sys.stdout.write(symbol + "\n")
    return 0


def cmd_config(cfg: Config, key: Optional[str], value: Optional[str]) -> int:
    if key is None:
        for line in cfg.show():
            console.print(line, markup=False)
        return 0
    if value is None:
        raise ConfigurationError("usage: config [KEY VALUE]")
    cfg.set(key, value)
    console.print(f"[green]{key}[/green] = {cfg[key]}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "pick"
    cfg = Config(args.config)

    try:
        if command == "config":
            setup_logging(args.log_level or "WARNING")
            return cmd_config(cfg, args.key, args.value)

        cfg.validate()
        if command == "pick":
            setup_logging(args.log_level or cfg["log_level"], log_file=cfg["log_file"] or None)
        else:
            setup_logging(args.log_level or "WARNING")
        columns = validate_columns(args.columns if args.columns is not None else cfg["columns"])
        output = "stdout" if args.stdout else cfg["output"]
        finder = _make_finder(cfg, args)

        if command == "search":
            return cmd_search(finder, args.query, columns)
        return cmd_pick(finder, columns, output)
    except ParseError as e:
        err_console.print(f"[red]dataset error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_PARSE_ERROR
    except ConfigurationError as e:
        err_console.print(f"[red]config error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
