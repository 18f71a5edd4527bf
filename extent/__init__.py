from importlib.resources import files

from .conversions import (
    UnrepresentableError,
    extent,
    from_closed,
    from_range,
    to_closed,
    to_range,
)
from .core import Extent, ExtentIter, ExtentRevIter
from .domain import (
    DEFAULT_DOMAIN,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    IntDomain,
)
from .interval import ClosedRange

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Extent",
    "ExtentIter",
    "ExtentRevIter",
    "ClosedRange",
    "IntDomain",
    "UnrepresentableError",
    "extent",
    "from_range",
    "to_range",
    "from_closed",
    "to_closed",
    "DEFAULT_DOMAIN",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "docs",
]
