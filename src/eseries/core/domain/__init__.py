"""
Domain models and the static series catalog.

Contains the E-series identifier, the immutable series record, the catalog
lookups built on it, and the query result model.
"""

from eseries.core.domain.catalog import (
    CATALOG,
    TOLERANCE,
    resolve,
    series_keys,
    series_record,
    tolerance,
    values,
)
from eseries.core.domain.results import QueryKind, QueryResult
from eseries.core.domain.series import ESeries, SeriesRecord

__all__ = [
    # Series model
    "ESeries",
    "SeriesRecord",
    # Catalog
    "CATALOG",
    "TOLERANCE",
    "resolve",
    "series_keys",
    "series_record",
    "tolerance",
    "values",
    # Query result model
    "QueryKind",
    "QueryResult",
]
