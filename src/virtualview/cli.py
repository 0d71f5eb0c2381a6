"""
Command-line interface for virtualview.

Renders YAML/JSON record files through the list and table widgets, which
is handy for checking windowing and sort behaviour without a terminal app.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

from virtualview.config import ViewConfig
from virtualview.events import KEY_DOWN, SORT
from virtualview.logging import get_logger, setup_logging
from virtualview.tui.list_view import ListView
from virtualview.tui.table_view import ColumnSpec, TableView

console = Console()
logger = get_logger("cli")

CONFIG_PATHS = [
    ("Current directory", Path.cwd() / "virtualview.yaml"),
    ("User config", Path.home() / ".config" / "virtualview" / "config.yaml"),
]


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render records through virtualview widgets",
        prog="virtualview",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Config file (defaults to the first file in `virtualview config path`)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=80,
        help="Render width in columns",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # list command
    list_parser = subparsers.add_parser("list", help="Render records as a list")
    list_parser.add_argument("file", help="YAML or JSON file holding a list of records")
    list_parser.add_argument("-f", "--field", help="Field shown for each record")
    list_parser.add_argument("--height", type=int, help="Visible rows")
    list_parser.add_argument(
        "-d", "--down", type=int, default=0, help="Press the down key N times before rendering"
    )

    # table command
    table_parser = subparsers.add_parser("table", help="Render records as a table")
    table_parser.add_argument("file", help="YAML or JSON file holding a list of records")
    table_parser.add_argument(
        "--column",
        action="append",
        dest="columns",
        help="Column as FIELD or FIELD:WIDTH (repeatable, defaults to all fields)",
    )
    table_parser.add_argument(
        "-s",
        "--sort",
        action="append",
        dest="sorts",
        default=[],
        help="Sort by FIELD; repeat the same field to flip the direction",
    )
    table_parser.add_argument("--height", type=int, help="Visible rows (default: all)")
    table_parser.add_argument(
        "-d", "--down", type=int, default=0, help="Press the down key N times before rendering"
    )

    # config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Show current configuration")
    config_init_parser = config_subparsers.add_parser("init", help="Initialize a new config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="virtualview.yaml",
        help="Output file path",
    )
    config_subparsers.add_parser("path", help="Show config file paths")

    args = parser.parse_args(argv)

    setup_logging(verbose=getattr(args, "verbose", False))

    if args.command == "list":
        cmd_list(args)
    elif args.command == "table":
        cmd_table(args)
    elif args.command == "config":
        cmd_config(args)
    else:
        parser.print_help()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> tuple[ViewConfig, Path | None]:
    """Load config from *path* or the first existing default location."""
    candidates = [Path(path)] if path else [p for _, p in CONFIG_PATHS]
    for candidate in candidates:
        if candidate.exists():
            return ViewConfig.from_env(ViewConfig.from_yaml(candidate)), candidate
    if path:
        console.print(f"[red]Config file not found: {path}[/red]")
        sys.exit(1)
    return ViewConfig.from_env(), None


def load_records(path: Path) -> list[Any]:
    """Read a list of records from a YAML (or JSON) file."""
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        sys.exit(1)

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if not isinstance(data, list):
        console.print(f"[red]Expected a list of records in {path}[/red]")
        sys.exit(1)
    logger.debug("Loaded %d records from %s", len(data), path)
    return data


def parse_column(spec: str) -> ColumnSpec:
    """Parse ``FIELD`` or ``FIELD:WIDTH`` into a sortable column."""
    field_key, _, width = spec.partition(":")
    try:
        column_width = int(width) if width else 12
    except ValueError:
        console.print(f"[red]Invalid column width in {spec!r}[/red]")
        sys.exit(1)
    return ColumnSpec(header=field_key, field_key=field_key, width=column_width, sortable=True)


def _infer_columns(records: list[Any]) -> list[ColumnSpec]:
    keys: list[str] = []
    for record in records:
        if isinstance(record, dict):
            for key in record:
                if key not in keys:
                    keys.append(str(key))
    return [parse_column(key) for key in keys]


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        console.print(line, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(args: argparse.Namespace) -> None:
    """Render records as a list."""
    config, _ = load_config(getattr(args, "config", None))
    records = load_records(Path(args.file))

    field_key = args.field

    def render_item(record: Any, index: int) -> str:
        if field_key and isinstance(record, dict):
            return str(record.get(field_key, ""))
        return str(record)

    view = ListView(items=records, render_item=render_item, height=args.height, config=config)
    for _ in range(args.down):
        view.emit(KEY_DOWN)

    _print_lines(view.render(getattr(args, "width", 80)))
    console.print(f"\n[dim]Selected: {view.selected_index} of {len(records)}[/dim]")


def cmd_table(args: argparse.Namespace) -> None:
    """Render records as a table."""
    config, _ = load_config(getattr(args, "config", None))
    records = load_records(Path(args.file))

    if args.columns:
        columns = [parse_column(spec) for spec in args.columns]
    else:
        columns = _infer_columns(records)

    view = TableView(data=records, columns=columns, sortable=True, height=args.height, config=config)
    for field_key in args.sorts:
        view.emit(SORT, field_key)
    for _ in range(args.down):
        view.emit(KEY_DOWN)

    _print_lines(view.render(getattr(args, "width", 80)))

    state = view.sort_state
    if state.active_field is not None:
        console.print(f"\n[dim]Sorted by {state.active_field} ({state.direction.value})[/dim]")


def cmd_config(args: argparse.Namespace) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        _config_show(getattr(args, "config", None))
    elif args.config_command == "init":
        _config_init(args.output)
    elif args.config_command == "path":
        _config_path()
    else:
        console.print("[yellow]Usage: virtualview config <show|init|path>[/yellow]")


def _config_show(path: str | None = None) -> None:
    """Show current configuration."""
    config, loaded_from = load_config(path)
    if loaded_from is None:
        console.print("[dim]No config file found. Using defaults.[/dim]")
    else:
        console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")

    console.print("[bold]Current Configuration:[/bold]\n")
    console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True))


def _config_init(output: str) -> None:
    """Initialize a new config file."""
    output_path = Path(output)

    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    with open(output_path, "w") as f:
        yaml.dump(ViewConfig().to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    console.print(f"[green]Created config file: {output_path}[/green]")


def _config_path() -> None:
    """Show config file search paths."""
    table = Table(title="Config file search paths")
    table.add_column("Location", style="cyan")
    table.add_column("Path")
    table.add_column("Exists", style="dim")

    for label, path in CONFIG_PATHS:
        table.add_row(label, str(path), "yes" if path.exists() else "no")

    console.print(table)


if __name__ == "__main__":
    main()
