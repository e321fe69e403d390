"""
QueryResult — Модель результата запроса

Immutable Pydantic модель ответа на запрос к E-series (CLI --json).
Полная совместимость с JSON Schema (contracts/schema/query_result.json).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from eseries.core.domain.series import ESeries

# =============================================================================
# ENUMS
# =============================================================================


class QueryKind(str, Enum):
    """Тип запроса"""

    NEAREST = "nearest"
    NEARBY = "nearby"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    TOLERANCE = "tolerance"
    SERIES = "series"
    RANGE = "range"
    LOWER_TOLERANCE_LIMIT = "lower-tolerance-limit"
    UPPER_TOLERANCE_LIMIT = "upper-tolerance-limit"
    TOLERANCE_LIMITS = "tolerance-limits"


# =============================================================================
# QUERY RESULT MODEL
# =============================================================================


class QueryResult(BaseModel):
    """
    Результат одного запроса.

    arguments — числовые аргументы запроса в порядке командной строки,
    values — результат (одно или несколько чисел, по возрастанию там,
    где это определено операцией).
    """

    query: QueryKind = Field(..., description="Тип запроса")
    series: str = Field(..., description="Имя серии, например 'E24'")
    arguments: tuple[float, ...] = Field(default=(), description="Аргументы запроса")
    values: tuple[float, ...] = Field(..., description="Результат запроса")

    model_config = {"frozen": True}  # Immutable

    @field_validator("series")
    @classmethod
    def validate_series_name(cls, v: str) -> str:
        """Имя серии должно соответствовать ESeries."""
        if v not in ESeries.__members__:
            raise ValueError(
                f"unknown series {v!r}, expected one of {', '.join(ESeries.__members__)}"
            )
        return v
