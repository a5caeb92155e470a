"""
Tests for JSON Schema Contract Validators

Тестирование валидатора builder_snapshot:
- Валидность самой схемы
- Валидация снапшотов всех вариантов builder'ов
- Детекция нарушений required полей, типов и enum
- Согласованность kind и типа value
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.builders import IntBuilder, NumericBuilder, StringBuilder
from src.core.contracts import (
    BuilderSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_builder_snapshot,
)

SCHEMA_DIR = Path(__file__).parent.parent.parent / "contracts" / "schema"


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_snapshot():
    """Валидный снапшот с одной диагностикой."""
    return {
        "kind": "integer",
        "value": 10,
        "diagnostics": [
            {
                "builder": "IntBuilder",
                "operation": "mod",
                "code": "DIVISION_BY_ZERO",
                "message": "Cannot divide by zero!",
                "arguments": ["0"],
            }
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_builder_snapshot_schema(self):
        schema = SchemaLoader().load_schema("builder_snapshot")

        assert schema["title"] == "BuilderSnapshot"
        assert "kind" in schema["required"]

    def test_schema_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("builder_snapshot") is loader.load_schema("builder_snapshot")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path):
        (tmp_path / "anything.json").write_text(json.dumps({"type": "string"}), encoding="utf-8")

        validator = ContractValidator("anything", loader=SchemaLoader(tmp_path))

        validator.validate("text")
        with pytest.raises(ValidationError):
            validator.validate(3)

    def test_schema_file_is_valid_json(self):
        with open(SCHEMA_DIR / "builder_snapshot.json", "r", encoding="utf-8") as f:
            assert json.load(f)["$id"] == "builder_snapshot.json"


# =============================================================================
# BUILDER SNAPSHOT CONTRACT
# =============================================================================


class TestBuilderSnapshotContract:
    """Тесты контракта builder_snapshot"""

    def test_valid_snapshot(self, valid_snapshot):
        validate_builder_snapshot(valid_snapshot)

    @pytest.mark.parametrize(
        "builder",
        [
            NumericBuilder(2.5).divide(0),
            NumericBuilder(None),
            IntBuilder(10).add(2, 3).mod(0).add(0.5),
            StringBuilder("Hello").add(" all").remove("").sub(0, 1),
        ],
    )
    def test_real_snapshots_satisfy_contract(self, builder):
        validate_builder_snapshot(builder.snapshot().model_dump(mode="json"))

    @pytest.mark.parametrize("field", ["kind", "value", "diagnostics"])
    def test_missing_required_field(self, valid_snapshot, field):
        del valid_snapshot[field]

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_unknown_kind(self, valid_snapshot):
        valid_snapshot["kind"] = "decimal"

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_integer_kind_requires_integer_value(self, valid_snapshot):
        valid_snapshot["value"] = 1.5

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_text_kind_requires_string_value(self, valid_snapshot):
        valid_snapshot["kind"] = "text"

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_unknown_diagnostic_code(self, valid_snapshot):
        valid_snapshot["diagnostics"][0]["code"] = "OOPS"

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_additional_properties_rejected(self, valid_snapshot):
        valid_snapshot["extra"] = True

        with pytest.raises(ValidationError):
            validate_builder_snapshot(valid_snapshot)

    def test_snapshot_validator_uses_builder_snapshot_schema(self, valid_snapshot):
        validator = BuilderSnapshotValidator()
        valid_snapshot["kind"] = "decimal"

        assert validator.schema_name == "builder_snapshot"
        with pytest.raises(ValidationError, match="decimal"):
            validator.validate(valid_snapshot)
