"""
procmeminfo.logging
AUTHOR: carter-vin

Structured JSON event logging

Contract:
- One JSON object per line to stdout
- Stable event vocabulary (allowlist)
- UTC timestamps only
- read/parse failures are only logged when Options.debug_backtrace is set
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from procmeminfo import __version__
from procmeminfo.options import Options

# Lifecycle events, emitted by the CLI host
LIFECYCLE_EVENT_TYPES = {
    "agent_start",
    "agent_tick",
    "agent_shutdown",
}

# Failure events, emitted by the library in debug mode only
FAILURE_EVENT_TYPES = {
    "source_unavailable",
    "source_read_failed",
    "value_malformed",
}

VALID_EVENT_TYPES = LIFECYCLE_EVENT_TYPES | FAILURE_EVENT_TYPES


def _truncate_message(value: str, *, limit: int = 200) -> str:
    if len(value) <= limit:
        return value
    return value[:limit] + f"...[truncated {len(value) - limit} chars]"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def emit_event(event_type: str, *, agent_version: str = __version__, **fields: Any) -> None:
    """
    Emit structured event line to stdout

    Rules:
    - event_type in VALID_EVENT_TYPES
    - event_type, agent_version, utc_now always present
    - sort_keys + compact separators for format
    """
    if event_type not in VALID_EVENT_TYPES:
        raise ValueError(f"invalid event_type: {event_type}")

    if "message" in fields and isinstance(fields["message"], str):
        fields["message"] = _truncate_message(fields["message"])

    payload: dict[str, Any] = {
        "event_type": event_type,
        "utc_now": utc_now_iso(),
        "agent_version": agent_version,
        **fields,
    }

    print(json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def emit_failure(options: Options, event_type: str, error: Exception, **fields: Any) -> None:
    """
    Log a recovered read/parse failure, no-op unless debug_backtrace is on
    """
    if event_type not in FAILURE_EVENT_TYPES:
        raise ValueError(f"invalid failure event_type: {event_type}")

    if not options.debug_backtrace:
        return

    emit_event(
        event_type,
        error_type=type(error).__name__,
        message=str(error),
        **fields,
    )
