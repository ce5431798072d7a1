"""
Math modules для bignum

Алгоритмы над массивами limb: перенос, сравнение, сложение/вычитание,
умножение свёрткой, деление столбиком, десятичный текст.
"""

# Limb Array
from src.bignum.math.limbs import (
    # Constants
    DECIMAL_BASE,
    DIGIT_SIZE,
    RADIX,
    # Normalization
    is_zero,
    propagate_carry,
    trim,
    # Conversion
    from_native,
    to_native,
    # Magnitude arithmetic
    add_magnitudes,
    compare_magnitudes,
    multiply_by_power_of_ten,
    scalar_multiply,
    shift_limbs,
    subtract_magnitudes,
)

# Convolution Multiplier
from src.bignum.math.convolution import (
    MAX_TRANSFORM_LENGTH_DEFAULT,
    ROUNDING_TOLERANCE_DEFAULT,
    MultiplierConfig,
    fft,
    get_default_config,
    multiply_magnitudes,
    next_power_of_two,
    schoolbook_multiply,
    set_default_config,
)

# Long Division
from src.bignum.math.division import (
    DivisionByZero,
    divmod_magnitudes,
)

# Decimal Text
from src.bignum.math.decimal_text import (
    DECIMAL_TOKEN_PATTERN,
    InvalidFormat,
    format_decimal,
    parse_decimal,
    split_tokens,
)

__all__ = [
    # Limb Array — Constants
    "DECIMAL_BASE",
    "DIGIT_SIZE",
    "RADIX",
    # Limb Array — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "from_native",
    "is_zero",
    "multiply_by_power_of_ten",
    "propagate_carry",
    "scalar_multiply",
    "shift_limbs",
    "subtract_magnitudes",
    "to_native",
    "trim",
    # Convolution — Constants
    "MAX_TRANSFORM_LENGTH_DEFAULT",
    "ROUNDING_TOLERANCE_DEFAULT",
    # Convolution — Types
    "MultiplierConfig",
    # Convolution — Functions
    "fft",
    "get_default_config",
    "multiply_magnitudes",
    "next_power_of_two",
    "schoolbook_multiply",
    "set_default_config",
    # Division
    "DivisionByZero",
    "divmod_magnitudes",
    # Decimal Text
    "DECIMAL_TOKEN_PATTERN",
    "InvalidFormat",
    "format_decimal",
    "parse_decimal",
    "split_tokens",
]
