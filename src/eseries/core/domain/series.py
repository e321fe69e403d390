"""
Series — Модель E-series (IEC 60063)

Immutable Pydantic модель, представляющая одну E-series:
базовые значения одной декады, допуск и производные величины
для поиска в логарифмическом пространстве.
Полная совместимость с JSON Schema (contracts/schema/series_record.json).
"""

import math
from enum import IntEnum
from typing import Any, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from eseries.core.math.numerical_safeguards import decade_mantissa

# =============================================================================
# ENUMS
# =============================================================================


class ESeries(IntEnum):
    """Идентификатор E-series (значение = количество значений на декаду)"""

    E3 = 3
    E6 = 6
    E12 = 12
    E24 = 24
    E48 = 48
    E96 = 96
    E192 = 192


# Базовая декада: все базовые значения нормализованы в [10, 100)
BASE_DECADE_LOWER = 10.0
BASE_DECADE_UPPER = 100.0


# =============================================================================
# ПРОИЗВОДНЫЕ ВЕЛИЧИНЫ
# =============================================================================


def log10_mantissas(base_values: Sequence[float]) -> tuple[float, ...]:
    """
    Логарифмическая позиция каждого значения внутри декады.

    Returns:
        Дробные части log10(x) для каждого x, в том же порядке
    """
    return tuple(decade_mantissa(math.log10(x))[1] for x in base_values)


def max_geometric_ratio(base_values: Sequence[float]) -> float:
    """
    Наибольшее отношение двух соседних базовых значений.

    Самый широкий мультипликативный разрыв в серии; используется
    для выбора безопасного окна поиска вокруг произвольного значения.
    """
    return max(upper / lower for lower, upper in zip(base_values, base_values[1:]))


# =============================================================================
# SERIES RECORD
# =============================================================================


class SeriesRecord(BaseModel):
    """
    Запись каталога E-series.

    Immutable модель (frozen=True). log10_mantissa и geometric_scale
    вычисляются из base_values при создании записи и никогда не
    передаются снаружи: любое переданное значение перезаписывается.
    """

    key: ESeries = Field(..., description="Идентификатор серии")
    base_values: tuple[float, ...] = Field(
        ..., min_length=2, description="Значения одной декады в [10, 100), по возрастанию"
    )
    tolerance: float = Field(..., gt=0, lt=1, description="Допуск (доля, 0.1 = 10%)")
    significant_figures: int = Field(
        ..., ge=1, le=15, description="Значащие цифры базовых значений"
    )

    # Производные (вычисляются в derive_log_quantities)
    log10_mantissa: tuple[float, ...] = Field(
        default=(), description="Дробные части log10 базовых значений"
    )
    geometric_scale: float = Field(
        default=0.0, description="Максимальное отношение соседних значений"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def derive_log_quantities(cls, data: Any) -> Any:
        """Вычисление log10_mantissa и geometric_scale из base_values."""
        if not isinstance(data, dict):
            return data

        try:
            values = [float(v) for v in data.get("base_values", ())]
        except (TypeError, ValueError):
            # Некорректные base_values отклонит валидация полей
            return data

        if len(values) < 2 or min(values) <= 0:
            return data

        return {
            **data,
            "log10_mantissa": log10_mantissas(values),
            "geometric_scale": max_geometric_ratio(values),
        }

    @field_validator("base_values")
    @classmethod
    def validate_base_decade(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """
        Проверка нормализации и порядка базовых значений.

        Все значения в [10, 100), строго по возрастанию, без дубликатов.
        """
        for x in v:
            if not BASE_DECADE_LOWER <= x < BASE_DECADE_UPPER:
                raise ValueError(
                    f"base value {x} outside [{BASE_DECADE_LOWER:g}, {BASE_DECADE_UPPER:g})"
                )

        for lower, upper in zip(v, v[1:]):
            if not lower < upper:
                raise ValueError(
                    f"base values must be strictly increasing, got {lower} before {upper}"
                )
        return v

    @model_validator(mode="after")
    def validate_count_per_decade(self) -> "SeriesRecord":
        """Количество базовых значений совпадает с номером серии (E12 → 12)."""
        if len(self.base_values) != self.key.value:
            raise ValueError(
                f"{self.key.name} requires {self.key.value} base values, "
                f"got {len(self.base_values)}"
            )
        return self

    @property
    def base_decade(self) -> int:
        """Декада базовых значений (floor(log10) первого значения)."""
        return math.floor(math.log10(self.base_values[0]))

    @property
    def name(self) -> str:
        """Имя серии, например 'E24'."""
        return self.key.name
