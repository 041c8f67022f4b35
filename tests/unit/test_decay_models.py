"""
Tests for Decay Models and JSON Schema Contracts

Покрывает:
- DecayInput / DecayResult: создание, aliases, immutability (frozen=True)
- JSON сериализация, включая NaN/Inf
- compute_decay (literal и strict)
- JSON Schema валидацию decay_input / decay_result
"""

import json
import math

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.contracts import (
    NON_FINITE_REJECT,
    SCHEMA_DIR,
    ContractRegistry,
    check_decay_input,
    check_decay_result,
    default_registry,
    validate_decay_input,
    validate_decay_result,
)
from src.core.domain import DecayInput, DecayResult, compute_decay
from src.core.math import DecayDomainViolation


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def default_input():
    """Базовый сценарий: 1000 единиц, 1%/сек, 10 сек."""
    return DecayInput()


@pytest.fixture
def valid_result_record():
    """Валидная запись decay_result."""
    return {"decayedAmount": 904.382}


# =============================================================================
# ТЕСТЫ: DecayInput
# =============================================================================


class TestDecayInput:
    def test_defaults(self, default_input):
        assert default_input.initial_amount == 1000.0
        assert default_input.decay_rate == 0.01
        assert default_input.elapsed_time_sec == 10.0

    def test_populate_by_alias(self):
        decay_input = DecayInput(initialAmount=500.0, decayRate=0.05, elapsedTime=1.0)
        assert decay_input.initial_amount == 500.0
        assert decay_input.decay_rate == 0.05
        assert decay_input.elapsed_time_sec == 1.0

    def test_populate_by_name(self):
        decay_input = DecayInput(initial_amount=500.0, decay_rate=0.05, elapsed_time_sec=1.0)
        assert decay_input.initial_amount == 500.0

    def test_out_of_domain_values_accepted(self):
        """Literal-режим: модель не ограничивает domain."""
        decay_input = DecayInput(decay_rate=1.5, elapsed_time_sec=-3.0)
        assert decay_input.decay_rate == 1.5

    def test_immutable(self, default_input):
        with pytest.raises(ValidationError):
            default_input.decay_rate = 0.5

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            DecayInput(decay_rate="fast")

    def test_dump_by_alias(self, default_input):
        assert default_input.model_dump(by_alias=True) == {
            "initialAmount": 1000.0,
            "decayRate": 0.01,
            "elapsedTime": 10.0,
        }


# =============================================================================
# ТЕСТЫ: DecayResult
# =============================================================================


class TestDecayResult:
    def test_to_record(self):
        result = DecayResult(decayed_amount=475.0)
        assert result.to_record() == {"decayedAmount": 475.0}

    def test_to_json(self):
        result = DecayResult(decayed_amount=475.0)
        assert json.loads(result.to_json()) == {"decayedAmount": 475.0}

    def test_nan_serialized_as_constant(self):
        result = DecayResult(decayed_amount=math.nan)
        payload = result.to_json()
        assert "NaN" in payload
        assert math.isnan(json.loads(payload)["decayedAmount"])

    def test_infinity_serialized_as_constant(self):
        result = DecayResult(decayed_amount=math.inf)
        assert "Infinity" in result.to_json()

    def test_immutable(self):
        result = DecayResult(decayed_amount=1.0)
        with pytest.raises(ValidationError):
            result.decayed_amount = 2.0

    def test_required(self):
        with pytest.raises(ValidationError):
            DecayResult()


# =============================================================================
# ТЕСТЫ: compute_decay
# =============================================================================


class TestComputeDecay:
    def test_default_scenario(self, default_input):
        result = compute_decay(default_input)
        assert result.decayed_amount == pytest.approx(904.382, abs=1e-3)

    def test_literal_nan(self):
        result = compute_decay(DecayInput(decay_rate=1.5))
        assert math.isnan(result.decayed_amount)

    def test_strict_violation(self):
        with pytest.raises(DecayDomainViolation):
            compute_decay(DecayInput(decay_rate=1.5), strict=True)

    def test_result_matches_schema(self, default_input):
        validate_decay_result(compute_decay(default_input).to_record())


# =============================================================================
# ТЕСТЫ: JSON Schema contracts
# =============================================================================


@pytest.fixture
def finite_only_registry(tmp_path):
    """Реестр, где decay_result требует конечного decayedAmount."""
    schema = json.loads((SCHEMA_DIR / "decay_result.json").read_text(encoding="utf-8"))
    schema["properties"]["decayedAmount"]["nonFinite"] = NON_FINITE_REJECT
    (tmp_path / "decay_result.json").write_text(json.dumps(schema), encoding="utf-8")
    return ContractRegistry(tmp_path)


class TestContractRegistry:
    def test_packaged_schemas_are_valid(self):
        for name in ("decay_input", "decay_result"):
            assert default_registry().load_schema(name)["title"] == name

    def test_schemas_ship_inside_package(self):
        assert SCHEMA_DIR.parent.name == "contracts"
        assert (SCHEMA_DIR / "decay_result.json").is_file()

    def test_default_registry_cached(self):
        assert default_registry() is default_registry()
        registry = default_registry()
        assert registry.validator("decay_result") is registry.validator("decay_result")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            default_registry().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            ContractRegistry(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "not-a-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            ContractRegistry(tmp_path).load_schema("broken")

    def test_errors_listed(self):
        errors = default_registry().errors("decay_result", {"decayedAmount": "x", "y": 1})
        assert len(errors) == 2


class TestNonFiniteKeyword:
    """Ключевое слово nonFinite: allow пропускает NaN/Inf, reject — нет."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_packaged_result_allows_non_finite(self, value):
        validate_decay_result({"decayedAmount": value})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_packaged_input_allows_non_finite(self, value):
        validate_decay_input({"decayRate": value})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_reject_mode(self, finite_only_registry, value):
        with pytest.raises(SchemaValidationError, match="not a finite number"):
            finite_only_registry.validate("decay_result", {"decayedAmount": value})

    def test_reject_mode_accepts_finite(self, finite_only_registry):
        finite_only_registry.validate("decay_result", {"decayedAmount": 904.382})

    def test_reject_mode_skips_non_numbers(self, finite_only_registry):
        errors = finite_only_registry.errors("decay_result", {"decayedAmount": "NaN"})
        assert errors == ["'NaN' is not of type 'number'"]


class TestDecayResultContract:
    def test_valid(self, valid_result_record):
        validate_decay_result(valid_result_record)

    def test_missing_key(self):
        with pytest.raises(SchemaValidationError):
            validate_decay_result({})

    def test_extra_key(self, valid_result_record):
        with pytest.raises(SchemaValidationError):
            validate_decay_result({**valid_result_record, "unit": "g"})

    def test_wrong_type(self):
        with pytest.raises(SchemaValidationError):
            validate_decay_result({"decayedAmount": "904.382"})

    def test_check_result_model(self):
        record = check_decay_result(DecayResult(decayed_amount=math.nan))
        assert list(record) == ["decayedAmount"]
        assert math.isnan(record["decayedAmount"])


class TestDecayInputContract:
    def test_model_record_is_valid(self, default_input):
        assert check_decay_input(default_input) == {
            "initialAmount": 1000.0,
            "decayRate": 0.01,
            "elapsedTime": 10.0,
        }

    def test_empty_is_valid(self):
        """Все поля имеют значения по умолчанию."""
        validate_decay_input({})

    def test_snake_case_keys_rejected(self):
        assert default_registry().errors("decay_input", {"decay_rate": 0.01})

    def test_wrong_type(self):
        with pytest.raises(SchemaValidationError):
            validate_decay_input({"decayRate": "1%"})
