"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций над E-series:
- Округление до значащих цифр (round_sig) без "хвостов" float
- Разложение логарифма на decade и mantissa
- NaN/Inf проверки для предотвращения распространения невалидных значений
- Валидация границ диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. round_sig(0, n) == 0, NaN/Inf возвращаются без изменений
2. Округление half away from zero (детерминированно, не зависит от платформы)
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from eseries.core.errors import ValidationError

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальное значение, поддерживаемое библиотекой.
# Ниже этого порога log10 теряет точность для decade-арифметики.
MINIMUM_E_VALUE: Final[float] = 1e-200

# Количество значащих цифр по умолчанию для round_sig
DEFAULT_SIG_FIGS: Final[int] = 6


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ ДО ЗНАЧАЩИХ ЦИФР
# =============================================================================


def round_sig(x: float, figures: int = DEFAULT_SIG_FIGS) -> float:
    """
    Округление числа до заданного количества значащих цифр.

    Округление выполняется по точному двоичному значению x
    (round half away from zero), поэтому результат не зависит
    от порядка величины: 4.7e-150 и 4.7e150 округляются одинаково.

    Args:
        x: Значение для округления
        figures: Количество значащих цифр (>= 1)

    Returns:
        Округлённое значение. 0 и NaN/Inf возвращаются без изменений.

    Raises:
        ValueError: Если figures < 1

    Examples:
        >>> round_sig(1234.5678, 3)
        1230.0
        >>> round_sig(0.000123456, 2)
        0.00012
        >>> round_sig(0.0)
        0.0
        >>> round_sig(10.5, 2)
        11.0
    """
    if figures < 1:
        raise ValueError(f"figures must be >= 1, got {figures}")

    if x == 0 or not is_valid_float(x):
        return x

    exact = Decimal(x)
    with localcontext() as ctx:
        # quantize требует, чтобы коэффициент результата помещался в prec
        ctx.prec = max(ctx.prec, figures + 2)
        quantum = Decimal(1).scaleb(exact.adjusted() - figures + 1)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


# =============================================================================
# DECADE / MANTISSA
# =============================================================================


def decade_mantissa(log_value: float) -> tuple[int, float]:
    """
    Разложение десятичного логарифма на decade и mantissa.

    decade = floor(log_value), mantissa = log_value - decade ∈ [0, 1)

    Args:
        log_value: Значение log10(x)

    Returns:
        (decade, mantissa)

    Examples:
        >>> decade_mantissa(2.5)
        (2, 0.5)
        >>> decade_mantissa(-0.25)
        (-1, 0.75)
    """
    decade = math.floor(log_value)
    return decade, log_value - decade


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Проверка, что граница диапазона не NaN/Inf.

    Raises:
        ValidationError: Если value NaN или Inf
    """
    if not is_valid_float(value):
        raise ValidationError(f"{name} value {value} is not finite")


def validate_minimum(value: float, name: str) -> None:
    """
    Проверка, что граница диапазона не меньше MINIMUM_E_VALUE.

    Raises:
        ValidationError: Если value < MINIMUM_E_VALUE
    """
    if value < MINIMUM_E_VALUE:
        raise ValidationError(
            f"{value} is too small. The {name.lower()} value must be greater than "
            f"or equal to {MINIMUM_E_VALUE}"
        )


def validate_range_bounds(start: float, stop: float) -> None:
    """
    Валидация границ диапазона E-значений.

    Сначала обе границы проверяются на NaN/Inf, затем обе на минимум:
    erange(E12, 0, inf) сообщает о бесконечном stop, а не о малом start.

    Args:
        start: Начало диапазона
        stop: Конец диапазона

    Raises:
        ValidationError: Если граница NaN/Inf или меньше MINIMUM_E_VALUE
    """
    validate_finite(start, "Start")
    validate_finite(stop, "Stop")
    validate_minimum(start, "Start")
    validate_minimum(stop, "Stop")
