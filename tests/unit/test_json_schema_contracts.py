"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Построение IntVec / SeqLT / SeqLE из контрактов
- Интеграция с Pydantic моделью IntVec
"""

import json
import logging
from pathlib import Path

import pytest
from jsonschema import ValidationError

from lattice_count.core.contracts import (
    IntVecValidator,
    SchemaLoader,
    SeqLEConfigValidator,
    SeqLTConfigValidator,
    int_vec_from_contract,
    sequence_from_contract,
    validate_int_vec,
    validate_seq_config,
)
from lattice_count.core.domain import IntVec
from lattice_count.core.iter import SeqLE, SeqLT


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("name", ["int_vec", "seq_lt", "seq_le"])
    def test_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("int_vec") is loader.load_schema("int_vec")

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_dir_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# INT_VEC CONTRACT
# =============================================================================


class TestIntVecContract:
    """Тесты для int_vec контракта"""

    def test_model_dump_is_valid(self) -> None:
        """Сериализованный IntVec соответствует схеме"""
        data = json.loads(IntVec([1, 2, 3]).model_dump_json())
        validate_int_vec(data)
        assert IntVecValidator().is_valid(data)

    def test_round_trip(self) -> None:
        v = IntVec([0, 5, 2])
        assert int_vec_from_contract(json.loads(v.model_dump_json())) == v

    def test_empty_values_valid(self) -> None:
        assert int_vec_from_contract({"values": []}) == IntVec([])

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"values": [1, "2"]},
            {"values": [1.5]},
            {"values": [True]},
            {"values": [1], "extra": 0},
        ],
    )
    def test_invalid_data_rejected(self, data: dict) -> None:
        assert not IntVecValidator().is_valid(data)
        with pytest.raises(ValidationError):
            validate_int_vec(data)


# =============================================================================
# SEQUENCE CONFIG CONTRACTS
# =============================================================================


class TestSequenceContracts:
    """Тесты для seq_lt / seq_le контрактов"""

    def test_lt_config_builds_seq_lt(self) -> None:
        seq = sequence_from_contract({"kind": "lt", "dim": 3, "bound": 4})
        assert isinstance(seq, SeqLT)
        assert seq == SeqLT(3, 4)
        assert seq.size() == 64

    def test_le_config_builds_seq_le(self) -> None:
        seq = sequence_from_contract({"kind": "le", "bounds": [0, 1, 2, 3, 0]})
        assert isinstance(seq, SeqLE)
        assert seq.bounds == IntVec([0, 1, 2, 3, 0])
        assert seq.size() == 24

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "lt", "dim": 0, "bound": 4},
            {"kind": "lt", "dim": 3, "bound": 0},
            {"kind": "lt", "dim": 3},
            {"kind": "lt", "dim": "3", "bound": 4},
        ],
    )
    def test_invalid_lt_config(self, data: dict) -> None:
        assert not SeqLTConfigValidator().is_valid(data)
        with pytest.raises(ValidationError):
            sequence_from_contract(data)

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "le"},
            {"kind": "le", "bounds": [1, -1]},
            {"kind": "le", "bounds": [1], "dim": 1},
        ],
    )
    def test_invalid_le_config(self, data: dict) -> None:
        assert not SeqLEConfigValidator().is_valid(data)
        with pytest.raises(ValidationError):
            sequence_from_contract(data)

    @pytest.mark.parametrize("data", [{"kind": "gt"}, {}, {"dim": 3, "bound": 4}])
    def test_unknown_kind_rejected(self, data: dict) -> None:
        with pytest.raises(ValidationError, match="Unknown sequence kind"):
            validate_seq_config(data)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(SeqLTConfigValidator().iter_errors({"kind": "lt", "dim": 0, "bound": 0}))
        assert len(errors) == 2


# =============================================================================
# LOGGING
# =============================================================================


class TestEnumerationLogging:
    """Тесты для логирования перечислителей"""

    def test_large_enumeration_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        seq = SeqLT(30, 2)
        with caplog.at_level(logging.WARNING, logger="lattice_count.core.iter.base"):
            it = iter(seq)
            assert next(it) == IntVec([0] * 30)
        assert any("Enumerating" in r.getMessage() for r in caplog.records)

    def test_construction_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lattice_count.core.iter.seq_le"):
            SeqLE(IntVec([1, 2]))
        assert any("SeqLE configured" in r.getMessage() for r in caplog.records)
