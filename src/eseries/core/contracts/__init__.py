"""
Contract Validation Module

Модуль для валидации JSON контрактов eseries.
"""

from .validators import (
    ContractValidator,
    QueryResultValidator,
    SchemaLoader,
    SeriesRecordValidator,
    validate_query_result,
    validate_series_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SeriesRecordValidator",
    "QueryResultValidator",
    # Functions
    "validate_series_record",
    "validate_query_result",
]
