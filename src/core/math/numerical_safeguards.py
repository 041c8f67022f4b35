"""
Numerical Safeguards — Float Primitives для Decay Calculator

Модуль содержит общие примитивы численной устойчивости:
- Epsilon-параметры для сравнений float
- IEEE-754 совместимые log2/exp2 (без ValueError/OverflowError из math)
- NaN/Inf проверки
- Валидаторы входных параметров (ValueError с именем параметра)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ieee_log2 / ieee_exp2 никогда не бросают исключений на float входах
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Относительная толерантность для is_close
# Совпадает с допуском сверки log2-формы и прямого возведения в степень
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 ЛОГАРИФМ И ЭКСПОНЕНТА
# =============================================================================


def ieee_log2(value: float) -> float:
    """
    log2 с семантикой IEEE-754 вместо исключений math.

    math.log2 бросает ValueError на 0 и отрицательных аргументах.
    Здесь:
        log2(0)        = -inf
        log2(x < 0)    = NaN
        log2(NaN)      = NaN
        log2(+inf)     = +inf

    Examples:
        >>> ieee_log2(8.0)
        3.0
        >>> ieee_log2(0.0)
        -inf
        >>> math.isnan(ieee_log2(-1.0))
        True
    """
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log2(value)


def ieee_exp2(exponent: float) -> float:
    """
    2 ** exponent с переполнением в +inf вместо OverflowError.

    Examples:
        >>> ieee_exp2(3.0)
        8.0
        >>> ieee_exp2(-math.inf)
        0.0
        >>> ieee_exp2(1e6)
        inf
    """
    try:
        return 2.0 ** exponent
    except OverflowError:
        return math.inf


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def relative_error(actual: float, expected: float, eps: float = EPS_CALC) -> float:
    """
    Относительная ошибка |actual - expected| / max(|expected|, eps).

    Examples:
        >>> relative_error(101.0, 100.0)
        0.01
        >>> relative_error(0.0, 0.0)
        0.0
    """
    return abs(actual - expected) / max(abs(expected), eps)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включены).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
