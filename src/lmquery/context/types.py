# src/lmquery/context/types.py
# Where the context for a query comes from. Exactly one variant per run.

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Union


@dataclass(frozen=True)
class NoContext:
    """Only the user query is sent."""


@dataclass(frozen=True)
class InlineValues:
    """Values given on the command line or piped in (strings or structured)."""
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class FilePath:
    """A text file whose whole content becomes the context."""
    path: Path


ContextSource = Union[NoContext, InlineValues, FilePath]
