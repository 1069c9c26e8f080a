"""
Command-line interface for item-edit.

Reads a JSON list of named, typed items, lets the user edit their values and
prints the edited list to stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ie_common.errors import ItemEditError, UsageError
from ie_core.events import parse_event
from ie_core.item_set import ItemSet
from ie_core.session import EditSession
from ie_ui.examples import example_text
from ie_ui.input_sources import read_input
from ie_ui.tui.system.headless import HeadlessUI
from ie_ui.wiring.dependencies import UIContext, configure_logging

# Initialize global context (lazy)
ctx_store = UIContext()

app = typer.Typer(
    help="Interactively edit a list of typed values (bool, int, float, string, enum) given as JSON.",
    add_completion=False,
)


@app.command()
def edit(
    stdin: bool = typer.Option(
        False,
        "--stdin",
        help="Read input from stdin; JSON terminated by an empty line.",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read input from a JSON file.",
    ),
    input_json: Optional[str] = typer.Option(
        None,
        "--input",
        "-i",
        help="Input given directly as a JSON string.",
    ),
    out_singleobj: bool = typer.Option(
        False,
        "--out-singleobj",
        help="Output a single object keyed by item name instead of an array (see --example).",
    ),
    example: bool = typer.Option(
        False,
        "--example",
        help="Print example input and output, then exit.",
    ),
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Do not open the editor; replay --event actions and print the result.",
    ),
    events: Optional[list[str]] = typer.Option(
        None,
        "--event",
        "-e",
        help="Scripted action for --headless: select:N, text:VALUE, complete:N or cancel. Repeatable.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Edit the items and print them as JSON once the user applies or leaves."""
    configure_logging(debug=debug, force=True)

    if example:
        typer.echo(example_text())
        raise typer.Exit()

    ctx_store.set_headless(headless)
    ui = ctx_store.ui
    try:
        scripted = [parse_event(spec) for spec in events or []]
        if scripted:
            if not isinstance(ui, HeadlessUI):
                raise UsageError("--event can only be used together with --headless.")
            ui.next_events = scripted

        raw = read_input(use_stdin=stdin, file=file, literal=input_json)
        items = ItemSet.load(raw)
        session = EditSession(items, single_object=out_singleobj)
        output = ui.editor.run(session)
    except ItemEditError as exc:
        ui.present.error(str(exc))
        raise typer.Exit(exc.exit_code)

    if output is None:
        ui.present.warning("Editor closed without a result.")
        raise typer.Exit(1)
    typer.echo(output)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
