"""Command line demos for switchyard."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from .app import Application
from .config import SwitchyardConfig, configure_logging
from .domain.input import Action, StaticTriggers
from .sinks.memory import InMemoryLogSink, InMemoryMailer

console = Console()


def run_editor_demo(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Open and save a file, reporting listener output")
    parser.add_argument("path", nargs="?", default="/path/to/file.txt", help="Document to open")
    parser.add_argument("--no-save", action="store_true", help="Only open the document")
    args = parser.parse_args(argv)

    config = SwitchyardConfig.from_env()
    configure_logging(config.logging)
    mailer = InMemoryMailer()
    log_sink = None if config.alerts.log_path else InMemoryLogSink()
    app = Application(config, log_sink=log_sink, mailer=mailer).configure()

    app.editor.open_file(args.path)
    if not args.no_save:
        app.editor.save_file()
    snapshot = app.snapshot()
    app.shutdown()

    table = Table(title="Listener output")
    table.add_column("Listener")
    table.add_column("Message")
    for line in app.log_sink.dump():
        table.add_row("log", line)
    for record in mailer.outbox():
        table.add_row(f"mail → {record.address}", record.message)
    console.print(table)
    console.print(f"Subscriptions during run: {snapshot['subscriptions']}", markup=False)


def run_command_demo(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Poll triggers and run the resulting command")
    parser.add_argument("triggers", nargs="*", type=_action, help="Active triggers: BUY, SELL")
    parser.add_argument("--unit", action="store_true", help="Modify the selected unit instead of trading")
    parser.add_argument("--value", type=int, help="Initial unit value")
    parser.add_argument("--undo", action="store_true", help="Undo the unit command afterwards")
    args = parser.parse_args(argv)

    config = SwitchyardConfig.from_env()
    configure_logging(config.logging)
    if args.value is not None:
        config.input.initial_unit_value = args.value
    app = Application(config, triggers=StaticTriggers(args.triggers))

    if not args.unit:
        if not app.handle_input():
            console.print("[yellow]No trigger fired.[/yellow]")
            return
        console.print(f"Actor journal: {', '.join(app.actor.journal)}")
        return

    command = app.unit_commands.poll()
    if command is None:
        console.print("[yellow]No trigger fired.[/yellow]")
        return
    unit = app.selection.selected
    command.execute()
    console.print(f"{unit.name}: {command.previous_value} -> {unit.value}")
    if args.undo:
        command.undo()
        console.print(f"{unit.name} after undo: {unit.value}")


def _action(value: str) -> Action:
    return Action(value.strip().upper())
