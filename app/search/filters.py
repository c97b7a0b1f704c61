"""
SQL expression helpers shared by the tutorial, project and resource searches.
"""
from typing import Iterable

from sqlalchemy import String, cast, or_

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_ci(column, term: str):
    """Case-insensitive substring match."""
    return column.ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE)


def tech_stack_any(column, terms: Iterable[str]):
    """
    Match rows whose JSON tech_stack list holds ANY of the given terms.

    The serialized list is matched against the quoted term, so "java"
    does not match "javascript".
    """
    serialized = cast(column, String)
    clauses = [
        serialized.ilike(f'%"{escape_like(term.strip())}"%', escape=LIKE_ESCAPE)
        for term in terms
        if term and term.strip()
    ]
    if not clauses:
        return None
    return or_(*clauses)
