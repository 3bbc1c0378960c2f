# takeoff_core/search.py

"""
Incremental aircraft search.
Substring match over the identifier columns, exact model-name hits first.
"""

from .constants import MODEL_FIELD


def _normalize_query(query):
    if query is None:
        return ""
    return str(query).strip().lower()


def matches(record, query):
    """True if any identifier field contains the (already lowered) query."""
    return any(
        value is not None and query in str(value).lower()
        for value in record.identifiers
    )


def is_exact_model_match(record, query):
    model = record.get(MODEL_FIELD)
    return model is not None and str(model).lower() == query


def suggest(query, table):
    """
    Ranked suggestions for a partial query.

    Args:
        query: Raw user text. Trimmed and compared case-insensitively.
        table: Iterable of AircraftRecord in table order.

    Returns:
        List of matching records. Exact Model_FAA matches come first,
        otherwise table order is kept. Empty for an empty query.
    """
    q = _normalize_query(query)
    if not q:
        return []

    hits = [rec for rec in table if matches(rec, q)]
    # sorted() is stable, so table order survives inside each tier
    return sorted(hits, key=lambda rec: 0 if is_exact_model_match(rec, q) else 1)
