"""
Engineering notation — форматирование чисел с SI-префиксами

Показатель степени округляется вниз до кратного трём, мантисса
округляется через round_sig:
    1234  → '1.23 k'
    0.001 → '1 m'
    1e30  → '1e30' (вне диапазона префиксов)
"""

import math
from typing import Final

from eseries.core.math.numerical_safeguards import is_valid_float, round_sig

# SI-префиксы от yocto (1e-24) до Yotta (1e24)
PREFIXES: Final[tuple[str, ...]] = (
    "y", "z", "a", "f", "p", "n", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y",
)  # fmt: skip

# Индекс пустого префикса (10^0) в PREFIXES
_UNIT_PREFIX_INDEX: Final[int] = 8

PREFIX_EXPONENT_MIN: Final[int] = -24
PREFIX_EXPONENT_MAX: Final[int] = 24

ENG_DEFAULT_SIG_FIGS: Final[int] = 3


def _plain(x: float) -> str:
    """Целые значения без '.0', остальные — кратчайшее repr."""
    if float(x).is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(float(x))


def eng_string(x: float, sig_figs: int = ENG_DEFAULT_SIG_FIGS, prefix: bool = True) -> str:
    """
    Число в упрощённой инженерной нотации.

    Args:
        x: Значение для форматирования
        sig_figs: Количество значащих цифр
        prefix: True — SI-префикс ('1.2 k'), False — обычная запись ('1200')

    Returns:
        Строковое представление ('inf', 'nan' для не-finite x)

    Examples:
        >>> eng_string(1234)
        '1.23 k'
        >>> eng_string(-1000)
        '-1 k'
        >>> eng_string(0.001, prefix=False)
        '0.001'
        >>> eng_string(1e-30)
        '1e-30'
    """
    if not is_valid_float(x):
        # NaN/Inf не имеют порядка величины
        return repr(float(x))

    sign = ""
    if x < 0:
        x = -x
        sign = "-"

    if x == 0:
        return sign + "0"

    exp = math.floor(math.log10(x))
    exp3 = exp - (exp % 3)
    x3 = round_sig(x / 10.0**exp3, sig_figs)

    if exp3 == 0:
        return sign + _plain(x3)

    if not prefix:
        return sign + _plain(round_sig(x3 * 10.0**exp3, sig_figs))

    if PREFIX_EXPONENT_MIN <= exp3 <= PREFIX_EXPONENT_MAX:
        return f"{sign}{_plain(x3)} {PREFIXES[exp3 // 3 + _UNIT_PREFIX_INDEX]}"

    return f"{sign}{_plain(x3)}e{exp3}"
