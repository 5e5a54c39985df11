"""Query predicate engine."""

from .engine import MISSING, as_document, matches, resolve_path, type_family
from .sorting import sort_by, sort_key

__all__ = ["MISSING", "as_document", "matches", "resolve_path", "sort_by", "sort_key", "type_family"]
