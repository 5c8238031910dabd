"""
procmeminfo.refresh
AUTHOR: carter-vin

One refresh pass over the /proc sources

Failure semantics:
- unreadable file -> treated as empty, previous values stay cached
- never raises for file problems; callers schedule the next pass
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from procmeminfo import mapping
from procmeminfo.logging import emit_failure
from procmeminfo.options import Options, resolve_options
from procmeminfo.parse import read_key_value_lines
from procmeminfo.store import AttributeStore


def read_key_value_file(path: Path, options: Optional[Options] = None) -> dict[str, str]:
    """
    Parse one key:value file, {} if it cannot be opened
    """
    options = resolve_options(options)
    try:
        handle = Path(path).open("rb")
    except OSError as e:
        emit_failure(options, "source_unavailable", e, path=str(path))
        return {}

    with handle:
        return read_key_value_lines(handle, options)


def refresh(
    store: AttributeStore,
    paths: Optional[Iterable[Path]] = None,
    options: Optional[Options] = None,
) -> None:
    """
    Read every source in order and merge each into the store
    """
    options = resolve_options(options)
    if paths is None:
        paths = mapping.SOURCE_PATHS

    for path in paths:
        store.merge_from_raw(read_key_value_file(path, options))
