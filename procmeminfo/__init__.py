"""procmeminfo package exports."""

__version__ = "0.1.0"

from procmeminfo.mapping import ATTRIBUTE_NAMES, SOURCE_PATHS
from procmeminfo.options import Options
from procmeminfo.parse import ValueFormatError, normalize_value, read_key_value_lines
from procmeminfo.refresh import read_key_value_file, refresh
from procmeminfo.store import AttributeStore

__all__ = [
    "ATTRIBUTE_NAMES",
    "AttributeStore",
    "Options",
    "SOURCE_PATHS",
    "ValueFormatError",
    "__version__",
    "normalize_value",
    "read_key_value_file",
    "read_key_value_lines",
    "refresh",
]
