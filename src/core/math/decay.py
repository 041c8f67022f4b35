"""
Decay — Continuous Exponential Decay через log2/exp2

Модуль вычисляет остаток величины после непрерывного экспоненциального
распада с постоянной долей потерь за секунду:
- Основная формула в log2-форме (буквальная, без валидации по умолчанию)
- Опциональный strict-режим с DecayDomainViolation
- Прямая форма A × (1 − r)^t для сверки
- Траектория распада, half-life и обратные преобразования

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compute_decayed_amount(A, r, 0) == A точно
2. compute_decayed_amount(A, 0, t) == A точно
3. Для r ∈ (0, 1), t ≥ 0: 0 < результат ≤ A, строго убывает по t
4. Literal-режим не бросает исключений: NaN/Inf пропагируют в результат
5. Результат не округляется

ФОРМУЛЫ:
    decayed_amount = A × 2^(t × log2(1 − r))
                   ≡ A × (1 − r)^t

    half_life = −1 / log2(1 − r)
    r(half_life) = 1 − 2^(−1 / half_life)
    t(fraction) = log2(fraction) / log2(1 − r)
"""

import logging
import math
from typing import Final

from src.core.math.numerical_safeguards import (
    ieee_exp2,
    ieee_log2,
    is_valid_float,
    validate_finite,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Исходное количество (безразмерное)
DEFAULT_INITIAL_AMOUNT: Final[float] = 1000.0

# Доля распада за секунду (1% в секунду)
DEFAULT_DECAY_RATE: Final[float] = 0.01

# Интервал распада (секунды)
DEFAULT_ELAPSED_TIME_SEC: Final[float] = 10.0

# Порог переключения на log1p для log2(1 − r) во вспомогательных функциях
# Если |r| < LOG1P_SWITCH_THRESHOLD → log1p(−r) / ln 2
LOG1P_SWITCH_THRESHOLD: Final[float] = 0.01

# Границы domain для strict-режима
DECAY_RATE_MIN: Final[float] = 0.0
DECAY_RATE_MAX: Final[float] = 1.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecayDomainViolation(ValueError):
    """
    Входы вне domain формулы распада (strict-режим).

    Бросается при r > 1 (log2 от отрицательного), r == 1 при t == 0
    (0 × −inf), отрицательных A/t/r и NaN/Inf на входе.
    В literal-режиме вместо исключения результат становится NaN/Inf.
    """
    pass


def check_decay_domain(
    initial_amount: float,
    decay_rate: float,
    elapsed_time_sec: float,
) -> None:
    """
    Проверка domain для strict-режима.

    Raises:
        DecayDomainViolation: если хотя бы один вход вне domain
    """
    try:
        validate_non_negative(initial_amount, "initial_amount")
        validate_non_negative(elapsed_time_sec, "elapsed_time_sec")
        validate_in_range(decay_rate, "decay_rate", DECAY_RATE_MIN, DECAY_RATE_MAX)
    except ValueError as e:
        raise DecayDomainViolation(str(e)) from e

    if decay_rate == DECAY_RATE_MAX and elapsed_time_sec == 0:
        raise DecayDomainViolation(
            "decay_rate=1 with elapsed_time_sec=0 is indeterminate (0 * log2(0))"
        )


# =============================================================================
# DECAY FACTOR & AMOUNT
# =============================================================================


def decay_factor(decay_rate: float, elapsed_time_sec: float) -> float:
    """
    Оставшаяся доля величины: 2^(t × log2(1 − r)).

    Literal-вычисление с IEEE-семантикой: log2(0) = −inf,
    log2(<0) = NaN, переполнение → +inf.

    Examples:
        >>> decay_factor(0.5, 2.0)
        0.25
        >>> decay_factor(1.0, 5.0)
        0.0
        >>> decay_factor(0.3, 0.0)
        1.0
    """
    exponent = elapsed_time_sec * ieee_log2(1.0 - decay_rate)
    return ieee_exp2(exponent)


def compute_decayed_amount(
    initial_amount: float,
    decay_rate: float,
    elapsed_time_sec: float,
    strict: bool = False,
) -> float:
    """
    Остаток величины после непрерывного экспоненциального распада.

    decayed_amount = initial_amount × 2^(elapsed_time_sec × log2(1 − decay_rate))

    Args:
        initial_amount: Исходное количество (A ≥ 0 для физического смысла)
        decay_rate: Доля распада за секунду (обычно в [0, 1))
        elapsed_time_sec: Прошедшее время (секунды, обычно ≥ 0)
        strict: Если True, проверяет domain через check_decay_domain

    Returns:
        decayed_amount без округления. В literal-режиме может быть NaN/Inf
        (r > 1, r == 1 при t == 0, NaN на входе).

    Raises:
        DecayDomainViolation: только при strict=True и входах вне domain

    Examples:
        >>> round(compute_decayed_amount(1000.0, 0.01, 10.0), 3)
        904.382
        >>> compute_decayed_amount(500.0, 0.0, 42.0)
        500.0
        >>> compute_decayed_amount(500.0, 1.0, 3.0)
        0.0
    """
    if strict:
        check_decay_domain(initial_amount, decay_rate, elapsed_time_sec)

    decayed_amount = initial_amount * decay_factor(decay_rate, elapsed_time_sec)

    if not is_valid_float(decayed_amount):
        logger.warning(
            "Non-finite decayed amount %r (initial_amount=%r, decay_rate=%r, "
            "elapsed_time_sec=%r)",
            decayed_amount,
            initial_amount,
            decay_rate,
            elapsed_time_sec,
        )
    else:
        logger.debug(
            "Decayed %r -> %r (decay_rate=%r, elapsed_time_sec=%r)",
            initial_amount,
            decayed_amount,
            decay_rate,
            elapsed_time_sec,
        )

    return decayed_amount


def compute_decayed_amount_direct(
    initial_amount: float,
    decay_rate: float,
    elapsed_time_sec: float,
) -> float:
    """
    Прямая форма A × (1 − r)^t для сверки с log2-формой.

    Требует 1 − r > 0: для дробной степени отрицательного основания
    Python возвращает complex, поэтому r ≥ 1 отвергается.

    Raises:
        ValueError: если decay_rate >= 1 или входы NaN/Inf

    Examples:
        >>> compute_decayed_amount_direct(500.0, 0.05, 1.0)
        475.0
    """
    validate_finite(initial_amount, "initial_amount")
    validate_finite(elapsed_time_sec, "elapsed_time_sec")
    validate_finite(decay_rate, "decay_rate")

    if decay_rate >= DECAY_RATE_MAX:
        raise ValueError(f"decay_rate must be < 1 for direct form, got {decay_rate}")

    return initial_amount * (1.0 - decay_rate) ** elapsed_time_sec


def decay_trajectory(
    initial_amount: float,
    decay_rate: float,
    times_sec: list[float],
    strict: bool = False,
) -> list[float]:
    """
    Остаток величины для каждого момента времени из times_sec.

    Args:
        initial_amount: Исходное количество
        decay_rate: Доля распада за секунду
        times_sec: Моменты времени (секунды), порядок сохраняется
        strict: Проверка domain для каждой точки

    Returns:
        Список той же длины, что times_sec

    Examples:
        >>> decay_trajectory(100.0, 0.5, [0.0, 1.0, 2.0])
        [100.0, 50.0, 25.0]
        >>> decay_trajectory(100.0, 0.5, [])
        []
    """
    return [
        compute_decayed_amount(initial_amount, decay_rate, t, strict=strict)
        for t in times_sec
    ]


# =============================================================================
# HALF-LIFE
# =============================================================================


def _log2_one_minus(decay_rate: float) -> float:
    # log1p точнее log2(1 - r) для малых r
    if abs(decay_rate) < LOG1P_SWITCH_THRESHOLD:
        return math.log1p(-decay_rate) / math.log(2.0)
    return math.log2(1.0 - decay_rate)


def _validate_open_rate(decay_rate: float) -> None:
    validate_finite(decay_rate, "decay_rate")

    if not DECAY_RATE_MIN < decay_rate < DECAY_RATE_MAX:
        raise ValueError(f"decay_rate must be in (0, 1), got {decay_rate}")


def half_life(decay_rate: float) -> float:
    """
    Время (секунды), за которое величина уменьшается вдвое.

    half_life = −1 / log2(1 − r)

    Raises:
        ValueError: если decay_rate вне (0, 1)

    Examples:
        >>> half_life(0.5)
        1.0
        >>> round(half_life(0.01), 4)
        68.9676
    """
    _validate_open_rate(decay_rate)
    return -1.0 / _log2_one_minus(decay_rate)


def rate_from_half_life(half_life_sec: float) -> float:
    """
    Доля распада за секунду по периоду полураспада.

    r = 1 − 2^(−1 / half_life) = −expm1(−ln 2 / half_life)

    Raises:
        ValueError: если half_life_sec <= 0 или NaN/Inf

    Examples:
        >>> round(rate_from_half_life(1.0), 12)
        0.5
    """
    validate_positive(half_life_sec, "half_life_sec")
    return -math.expm1(-math.log(2.0) / half_life_sec)


def time_to_fraction(decay_rate: float, fraction: float) -> float:
    """
    Время (секунды), через которое остаётся доля fraction от исходной величины.

    t = log2(fraction) / log2(1 − r)

    Raises:
        ValueError: если decay_rate вне (0, 1) или fraction вне (0, 1]

    Examples:
        >>> time_to_fraction(0.5, 0.25)
        2.0
        >>> time_to_fraction(0.2, 1.0)
        0.0
    """
    _validate_open_rate(decay_rate)
    validate_in_range(fraction, "fraction", max_value=1.0)

    if fraction <= 0:
        raise ValueError(f"fraction must be positive, got {fraction}")

    # log2(1) == 0.0 точно, но деление на отрицательное даёт -0.0
    if fraction == 1.0:
        return 0.0

    return math.log2(fraction) / _log2_one_minus(decay_rate)
