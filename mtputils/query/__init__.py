"""Query classification and resolution over a parsed listing."""

from .resolver import detailed_view, resolve, resolve_queries, simple_view, unmatched_terms
from .terms import (
    QueryTerm,
    TermKind,
    classify_term,
    classify_terms,
    compile_wildcard,
    contains_wildcard,
)

__all__ = [
    "QueryTerm",
    "TermKind",
    "classify_term",
    "classify_terms",
    "compile_wildcard",
    "contains_wildcard",
    "detailed_view",
    "resolve",
    "resolve_queries",
    "simple_view",
    "unmatched_terms",
]
