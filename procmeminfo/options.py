"""
procmeminfo.options
AUTHOR: carter-vin

Process-wide options

- debug_backtrace: log read/parse failures as events (silent otherwise)
- env override: PROCMEMINFO_DEBUG_BACKTRACE=1
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEBUG_BACKTRACE_ENV = "PROCMEMINFO_DEBUG_BACKTRACE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Options:
    debug_backtrace: bool = False

    @staticmethod
    def from_env() -> "Options":
        raw = os.environ.get(DEBUG_BACKTRACE_ENV, "")
        return Options(debug_backtrace=raw.strip().lower() in _TRUTHY)


def resolve_options(options: Optional[Options]) -> Options:
    """
    Explicit options win; otherwise read the environment
    """
    if options is not None:
        return options
    return Options.from_env()
