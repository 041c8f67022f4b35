"""
DecayInput / DecayResult — Модели входа и результата распада

Immutable Pydantic модели для вызова Decay Calculator.
Полная совместимость с JSON Schema (src/core/contracts/schema/decay_input.json,
src/core/contracts/schema/decay_result.json).

Внешние имена полей (aliases) совпадают с ключом вывода: decayedAmount.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from src.core.math.decay import (
    DEFAULT_DECAY_RATE,
    DEFAULT_ELAPSED_TIME_SEC,
    DEFAULT_INITIAL_AMOUNT,
    compute_decayed_amount,
)


# =============================================================================
# DECAY INPUT
# =============================================================================


class DecayInput(BaseModel):
    """
    Вход Decay Calculator.

    Immutable модель (frozen=True). Значения по умолчанию воспроизводят
    базовый сценарий: 1000 единиц, 1% в секунду, 10 секунд.

    Ограничения domain здесь не проверяются: literal-режим допускает
    любые float, включая NaN/Inf.
    """

    initial_amount: float = Field(
        DEFAULT_INITIAL_AMOUNT,
        alias="initialAmount",
        description="Исходное количество",
    )
    decay_rate: float = Field(
        DEFAULT_DECAY_RATE,
        alias="decayRate",
        description="Доля распада за секунду (обычно в [0, 1))",
    )
    elapsed_time_sec: float = Field(
        DEFAULT_ELAPSED_TIME_SEC,
        alias="elapsedTime",
        description="Прошедшее время (секунды)",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        ser_json_inf_nan="constants",
    )


# =============================================================================
# DECAY RESULT
# =============================================================================


class DecayResult(BaseModel):
    """
    Результат Decay Calculator: единственное поле decayedAmount.

    NaN/Inf допустимы (literal-режим) и сериализуются в JSON как
    NaN / Infinity / -Infinity.
    """

    decayed_amount: float = Field(
        ..., alias="decayedAmount", description="Остаток после распада"
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        ser_json_inf_nan="constants",
    )

    def to_record(self) -> Dict[str, Any]:
        """Dict с внешним ключом: {"decayedAmount": value}."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """JSON строка с внешним ключом."""
        return self.model_dump_json(by_alias=True)


def compute_decay(decay_input: DecayInput, strict: bool = False) -> DecayResult:
    """
    Вычисление DecayResult из DecayInput.

    Args:
        decay_input: Параметры распада
        strict: Проверка domain (см. check_decay_domain)

    Raises:
        DecayDomainViolation: только при strict=True и входах вне domain
    """
    decayed_amount = compute_decayed_amount(
        decay_input.initial_amount,
        decay_input.decay_rate,
        decay_input.elapsed_time_sec,
        strict=strict,
    )
    return DecayResult(decayed_amount=decayed_amount)
