"""
Контракт снапшота builder'а

Снапшот (BuilderSnapshot.model_dump(mode="json")) проверяется по
contracts/schema/builder_snapshot.json, диалект Draft 2020-12.
Pydantic гарантирует форму модели внутри процесса, схема фиксирует
JSON-представление для внешних потребителей.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# contracts/schema/ в корне репозитория
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из каталога с meta-проверкой и кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема <schema_dir>/<schema_name>.json.

        Raises:
            FileNotFoundError: Файла нет
            ValueError: Файл не проходит check_schema Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка JSON-данных по одной именованной схеме."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)


class BuilderSnapshotValidator(ContractValidator):
    def __init__(self):
        super().__init__("builder_snapshot")


def validate_builder_snapshot(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованного снапшота builder'а.

    Raises:
        ValidationError: Снапшот не соответствует builder_snapshot.json
    """
    BuilderSnapshotValidator().validate(data)
