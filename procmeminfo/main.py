"""
procmeminfo.main
------------
AUTHOR: carter-vin

Operator CLI around the attribute store

- `procmeminfo snapshot` refreshes once and prints the attributes
- `procmeminfo run` plays the scheduler: refresh + export on a fixed interval
- the library modules never schedule anything themselves
"""

from __future__ import annotations

import json
import platform
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import typer

from procmeminfo import __version__
from procmeminfo.logging import emit_event
from procmeminfo.options import Options
from procmeminfo.refresh import refresh
from procmeminfo.store import AttributeStore

app = typer.Typer(
    add_completion=False,
    help="procmeminfo: /proc memory and process status attributes",
)


# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


def _options(debug: bool) -> Options:
    # --debug forces it on, otherwise the env decides
    if debug:
        return Options(debug_backtrace=True)
    return Options.from_env()


def attributes_to_json(attrs: dict[str, Any]) -> str:
    return json.dumps(attrs, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: procmeminfo --help")


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"procmeminfo v{__version__}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("snapshot")
def snapshot(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log read/parse failures as events.",
    ),
) -> None:
    """
    Refresh once and print the exported attributes as JSON
    """
    store = AttributeStore()
    refresh(store, options=_options(debug))

    attrs: dict[str, Any] = {}
    store.export_into(attrs)
    typer.echo(attributes_to_json(attrs))


@app.command("run")
def run(
    interval: int = typer.Option(
        2,
        help="Refresh interval (seconds).",
        min=1,
    ),
    count: int = typer.Option(
        0,
        help="Stop after this many refreshes (0 = run until interrupted).",
        min=0,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log read/parse failures as events.",
    ),
) -> None:
    """
    Refresh and print attributes on a fixed interval
    """
    options = _options(debug)
    store = AttributeStore()

    emit_event("agent_start", mode="run", interval_s=interval, count=count)

    ticks = 0
    try:
        while True:
            start = time.monotonic()

            refresh(store, options=options)
            attrs: dict[str, Any] = {}
            store.export_into(attrs)
            typer.echo(attributes_to_json(attrs))

            ticks += 1
            elapsed = time.monotonic() - start
            emit_event(
                "agent_tick",
                mode="run",
                tick=ticks,
                attributes=len(attrs),
                tick_elapsed_ms=int(elapsed * 1000),
            )

            if count and ticks >= count:
                break

            time.sleep(max(0.0, interval - elapsed))

    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        pass

    finally:
        emit_event("agent_shutdown", mode="run", ticks=ticks)


if __name__ == "__main__":
    app()
