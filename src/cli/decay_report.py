"""
Decay Report — печать остатка после распада

Без аргументов печатает одну строку для базового сценария
(1000 единиц, 1% в секунду, 10 секунд):

    { decayedAmount: 904.3820750088043 }

Флаги переопределяют параметры; --json печатает запись через
pydantic сериализатор, --strict включает проверку domain.
Записи входа и результата проверяются по JSON Schema контрактам
до печати; нарушение контракта → exit code 3, stdout пуст.
"""

import argparse
import logging
import math
import sys
from decimal import Decimal
from typing import Optional, Sequence

from jsonschema import ValidationError

from src.core.contracts import check_decay_input, check_decay_result
from src.core.domain import DecayInput, DecayResult, compute_decay
from src.core.math.decay import (
    DEFAULT_DECAY_RATE,
    DEFAULT_ELAPSED_TIME_SEC,
    DEFAULT_INITIAL_AMOUNT,
    DecayDomainViolation,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOMAIN_VIOLATION = 2
EXIT_CONTRACT_VIOLATION = 3

RESULT_KEY = "decayedAmount"


def format_amount(value: float) -> str:
    """
    Текстовое представление float так, как его печатает console.log.

    Кратчайшие round-trip цифры (repr) в нотации Number.prototype.toString:
    целые без ".0", экспонента только вне [1e-6, 1e21) ("e+N" / "e-N"),
    NaN / Infinity / -Infinity, отрицательный ноль как "-0".

    Examples:
        >>> format_amount(904.5)
        '904.5'
        >>> format_amount(1000.0)
        '1000'
        >>> format_amount(1e-7)
        '1e-7'
        >>> format_amount(float('-inf'))
        '-Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value = 0.<digits> × 10^point
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{point - 1:+d}"

    return sign + text


def render_result(result: DecayResult) -> str:
    """Одна key-value строка: { decayedAmount: <value> }."""
    return f"{{ {RESULT_KEY}: {format_amount(result.decayed_amount)} }}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the remaining amount after continuous exponential decay"
    )
    parser.add_argument(
        "--initial-amount",
        type=float,
        default=DEFAULT_INITIAL_AMOUNT,
        help=f"Initial amount (default: {DEFAULT_INITIAL_AMOUNT})",
    )
    parser.add_argument(
        "--decay-rate",
        type=float,
        default=DEFAULT_DECAY_RATE,
        help=f"Fraction lost per second (default: {DEFAULT_DECAY_RATE})",
    )
    parser.add_argument(
        "--seconds",
        type=float,
        default=DEFAULT_ELAPSED_TIME_SEC,
        help=f"Elapsed time in seconds (default: {DEFAULT_ELAPSED_TIME_SEC})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result record as JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject inputs outside the decay domain instead of printing NaN/Inf",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    decay_input = DecayInput(
        initial_amount=args.initial_amount,
        decay_rate=args.decay_rate,
        elapsed_time_sec=args.seconds,
    )

    try:
        check_decay_input(decay_input)
        result = compute_decay(decay_input, strict=args.strict)
        check_decay_result(result)
    except DecayDomainViolation as e:
        logger.error("Decay domain violation: %s", e)
        return EXIT_DOMAIN_VIOLATION
    except ValidationError as e:
        logger.error("Decay record violates contract: %s", e.message)
        return EXIT_CONTRACT_VIOLATION

    if args.json:
        print(result.to_json())
    else:
        print(render_result(result))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
