"""
procmeminfo.parse
AUTHOR: carter-vin

key:value line parsing for /proc style files

- one key:value pair per line, split on ':'
- values ending in " kB" are converted to bytes
- bad lines are skipped, never raised
"""

from __future__ import annotations

import re
from typing import IO, AnyStr, Optional

from procmeminfo.logging import emit_failure
from procmeminfo.options import Options, resolve_options

KB_SUFFIX = "kB"
KB_MULTIPLIER = 1024

# Signed 64-bit bounds, same as the kernel's counters
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ValueFormatError(ValueError):
    """
    Raised when a kB value has no valid integer in front of the unit
    """


def _parse_int64(text: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueFormatError(f"invalid integer: {text!r}")
    number = int(text)
    if number < _INT64_MIN or number > _INT64_MAX:
        raise ValueFormatError(f"integer out of range: {text!r}")
    return number


def normalize_value(value: str) -> str:
    """
    Normalize one raw value

    - " 1009236 kB" -> "1033457664"
    - "R (running)" -> "R (running)"

    Raises ValueFormatError when the kB suffix is present but the amount is not an integer,
    or when the byte count does not fit a signed 64-bit integer
    """
    value = value.strip()
    if not value.endswith(KB_SUFFIX):
        return value

    # Only " kB" is stripped; "12kB" stays as-is and fails to parse
    if value.endswith(" " + KB_SUFFIX):
        value = value[: -len(KB_SUFFIX) - 1]
    amount = _parse_int64(value) * KB_MULTIPLIER
    if amount < _INT64_MIN or amount > _INT64_MAX:
        raise ValueFormatError(f"byte count out of range: {value!r} kB")
    return str(amount)


def _decode_line(line: AnyStr) -> str:
    if isinstance(line, bytes):
        # Replace invalid bytes, pseudo-files are not guaranteed UTF-8
        line = line.decode("utf-8", errors="replace")
    return line.rstrip("\r\n")


def read_key_value_lines(stream: IO[AnyStr], options: Optional[Options] = None) -> dict[str, str]:
    """
    Read key:value lines from a binary or text stream

    Binary streams are decoded per line with replacement, so a bad byte only garbles its own line.
    Text streams are decoded by the caller; a decode error there ends parsing like any read failure.
    Lines without exactly one ':' are ignored, so values containing a colon are dropped.
    Returns an empty dict for empty or unparseable input.
    """
    options = resolve_options(options)
    values: dict[str, str] = {}

    try:
        for raw_line in stream:
            parts = _decode_line(raw_line).split(":")
            if len(parts) != 2:
                continue

            key, raw_value = parts
            try:
                values[key] = normalize_value(raw_value)
            except ValueFormatError as e:
                emit_failure(options, "value_malformed", e, key=key)
    except (OSError, ValueError) as e:
        # Keep whatever was read before the stream broke
        emit_failure(options, "source_read_failed", e)

    return values
