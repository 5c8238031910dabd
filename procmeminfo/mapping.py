"""
procmeminfo.mapping
AUTHOR: carter-vin

Source files and raw key -> attribute name table

- read-only: exposed through MappingProxyType
- shared by every AttributeStore
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

MEMINFO_PATH = Path("/proc/meminfo")
PROC_STATUS_PATH = Path("/proc/self/status")

# Refresh order is fixed: system memory first, then this process
SOURCE_PATHS: tuple[Path, ...] = (MEMINFO_PATH, PROC_STATUS_PATH)

ATTRIBUTE_NAMES = MappingProxyType(
    {
        # /proc/meminfo
        "MemTotal": "system.memory.total",
        "MemFree": "system.memory.free",
        "MemAvailable": "system.memory.available",
        "Buffers": "system.memory.buffers",
        "Cached": "system.memory.cached",
        "SwapCached": "system.memory.swap.cached",
        "Active": "system.memory.active",
        "Inactive": "system.memory.inactive",
        "SwapTotal": "system.memory.swap.total",
        "SwapFree": "system.memory.swap.free",
        "Dirty": "system.memory.dirty",
        "Writeback": "system.memory.writeback",
        "Slab": "system.memory.slab",
        "VmallocTotal": "system.memory.vmalloc.total",
        "VmallocUsed": "system.memory.vmalloc.used",
        "VmallocChunk": "system.memory.vmalloc.chunk",
        # /proc/self/status
        "nonvoluntary_ctxt_switches": "sched.cs.involuntary",
        "voluntary_ctxt_switches": "sched.cs.voluntary",
        "FDSize": "descriptor.count",
        "VmData": "vm.data.size",
        "VmLck": "vm.locked.size",
        "VmPTE": "vm.pte.size",
        "VmHWM": "vm.rss.peak",
        "VmRSS": "vm.rss.size",
        "VmLib": "vm.shared.size",
        "VmStk": "vm.stack.size",
        "VmSwap": "vm.swap.size",
        "VmPeak": "vm.vma.peak",
        "VmSize": "vm.vma.size",
    }
)
