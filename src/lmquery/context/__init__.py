# Context layer: where the context comes from and how it is cleaned and cut.

from .assembler import ALLOWED_EXTENSIONS, assemble_context, resolve_context_source
from .sanitize import sanitize_text
from .truncate import CHARS_PER_TOKEN, truncate_to_budget
from .types import ContextSource, FilePath, InlineValues, NoContext

__all__ = [
    "ALLOWED_EXTENSIONS",
    "CHARS_PER_TOKEN",
    "ContextSource",
    "FilePath",
    "InlineValues",
    "NoContext",
    "assemble_context",
    "resolve_context_source",
    "sanitize_text",
    "truncate_to_budget",
]
