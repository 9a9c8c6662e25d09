"""
Inspect command: load a plugin, show its deferred chains, replay them.

A plugin is a Python file exposing register(atom).
"""

import importlib.util
import json
from pathlib import Path
from typing import Any, Dict, List

import typer
from rich.console import Console
from rich.table import Table

from atomkit.atom import DEFERRED_CATEGORIES, Atom
from atomkit.core.canonical import describe, describe_calls
from atomkit.host import Host

console = Console()

LIFECYCLE = ("init", "widgets_init", "admin_menu", "admin_init", "rest_api_init", "wp_dashboard_setup")


def load_plugin(path: Path, atom: Atom) -> None:
    """
    Import plugin file and call its register(atom).

    Raises:
        FileNotFoundError: If path does not exist
        AttributeError: If the plugin has no register() function
    """
    if not path.is_file():
        raise FileNotFoundError(str(path))
    spec = importlib.util.spec_from_file_location(f"atomkit_plugin_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load plugin: {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    register = getattr(module, "register", None)
    if register is None:
        raise AttributeError(f"{path} has no register(atom) function")
    register(atom)


def pending_snapshot(atom: Atom) -> List[Dict[str, Any]]:
    rows = []
    for category in DEFERRED_CATEGORIES:
        for entry in atom.registry(category).pending:
            rows.append({"category": category, "key": entry.key, "calls": describe_calls(entry.log)})
    return rows


def host_snapshot(host: Host) -> Dict[str, Any]:
    return {
        "post_types": describe(host.post_types),
        "shortcodes": sorted(host.shortcodes),
        "ajax_actions": sorted(host.ajax_actions),
        "rest_routes": sorted(host.rest_routes),
        "menu_pages": [page["slug"] for page in host.menu_pages],
        "settings": describe(host.settings),
        "widgets": sorted(host.widgets),
        "dashboard_widgets": sorted(host.dashboard_widgets),
        "output": describe(host.output),
        "diagnostics": [
            {"level": d.level, "message": d.message, "context": describe(d.context)}
            for d in host.diagnostics
        ],
    }


def report_snapshot(atom: Atom) -> Dict[str, Any]:
    return {
        category: {
            "replayed": report.replayed,
            "failed": report.failed,
            "skipped": [{"key": key, "name": rec.name} for key, rec in report.skipped_calls],
        }
        for category, report in atom.last_reports.items()
    }


def inspect_command(
    plugin: Path = typer.Argument(..., help="Plugin file exposing register(atom)"),
    fire: bool = typer.Option(True, "--fire/--no-fire", help="Run the host lifecycle after loading"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show deferred chains recorded by a plugin and replay them.

    Examples:
        atomkit inspect examples/all_features.py
        atomkit inspect examples/all_features.py --no-fire
        atomkit inspect examples/all_features.py --json
    """
    try:
        host = Host()
        atom = Atom(host)
        load_plugin(plugin, atom)
        pending = pending_snapshot(atom)

        if fire:
            for hook in LIFECYCLE:
                host.hooks.do_action(hook)

        if json_output:
            output: Dict[str, Any] = {"pending": pending}
            if fire:
                output["reports"] = report_snapshot(atom)
                output["host"] = host_snapshot(host)
            print(json.dumps(output, indent=2))
            raise typer.Exit(0)

        console.print(f"[bold]Plugin:[/bold] {plugin}")
        table = Table(title="Deferred chains")
        table.add_column("Category", style="green")
        table.add_column("Key", style="yellow")
        table.add_column("Calls", style="cyan")
        for row in pending:
            table.add_row(row["category"], row["key"], " -> ".join(c["name"] for c in row["calls"]))
        console.print(table)

        if fire:
            reports = Table(title="Checkpoint")
            reports.add_column("Category", style="green")
            reports.add_column("Replayed", justify="right", style="cyan")
            reports.add_column("Failed", justify="right", style="red")
            reports.add_column("Skipped calls", style="dim")
            for category, rep in report_snapshot(atom).items():
                skipped = ", ".join(f"{s['key']}.{s['name']}" for s in rep["skipped"])
                reports.add_row(category, str(rep["replayed"]), str(rep["failed"]), skipped)
            console.print(reports)

            snap = host_snapshot(host)
            registrations = Table(title="Host registrations")
            registrations.add_column("Kind", style="green")
            registrations.add_column("Names", style="yellow")
            for kind in ("post_types", "shortcodes", "ajax_actions", "rest_routes", "menu_pages", "widgets", "dashboard_widgets"):
                names = snap[kind] if isinstance(snap[kind], list) else sorted(snap[kind])
                registrations.add_row(kind, ", ".join(names))
            console.print(registrations)

            for diag in host.diagnostics:
                console.print(f"[yellow]{diag.level}:[/yellow] {diag.message} {diag.context}")

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Plugin file not found", "path": str(plugin)}))
        else:
            console.print(f"[red]Error: Plugin file not found:[/red] {plugin}")
        raise typer.Exit(2)
    except typer.Exit:
        raise
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
