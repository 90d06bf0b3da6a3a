"""Article content resolution."""

from .assembler import ArticleResolver
from .language import (
    query_string_source,
    resolve_language,
    tab_marker_source,
)
from .selector import select_fields

__all__ = [
    "ArticleResolver",
    "query_string_source",
    "resolve_language",
    "select_fields",
    "tab_marker_source",
]
