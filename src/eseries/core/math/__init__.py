"""
Core math modules для eseries

Математические примитивы с гарантией стабильности.
"""

# Numerical Safeguards
from eseries.core.math.numerical_safeguards import (
    # Constants
    DEFAULT_SIG_FIGS,
    MINIMUM_E_VALUE,
    # Rounding
    round_sig,
    # Log decomposition
    decade_mantissa,
    # NaN/Inf
    is_valid_float,
    # Validation
    validate_finite,
    validate_minimum,
    validate_range_bounds,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_SIG_FIGS",
    "MINIMUM_E_VALUE",
    # Numerical Safeguards — Rounding
    "round_sig",
    # Numerical Safeguards — Log decomposition
    "decade_mantissa",
    # Numerical Safeguards — NaN/Inf
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_minimum",
    "validate_range_bounds",
]
