"""
JSON Schema Contract Validators

Validates serialized big integers against the formal JSON Schema contracts
bundled with the package (bigarith/core/contracts/schema/).

Schemas:
- magnitude.json (MagnitudeRecord)
- signed_integer.json (SignedIntegerRecord, references magnitude.json)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader of the bundled JSON Schema files.

    Every loaded schema is meta-validated and registered under its $id, so
    that cross-schema $ref links resolve without network access.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry = Registry()

    @property
    def registry(self) -> Registry:
        """Registry of every schema loaded so far"""
        return self._registry

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'magnitude')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        self._registry = self._registry.with_resource(
            schema["$id"], Resource.from_contents(schema)
        )
        logger.debug("loaded schema %s (%s)", schema_name, schema["$id"])
        return schema

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every *.json file of the schema directory."""
        for schema_path in sorted(self._schema_dir.glob("*.json")):
            self.load_schema(schema_path.stem)
        return dict(self._schemas)


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class of contract validators.

    Wraps a Draft 2020-12 validator bound to one schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Name of the schema to validate against
        """
        _SCHEMA_LOADER.load_all()

        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, registry=_SCHEMA_LOADER.registry
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If data violates the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Iterate over all validation errors.

        Yields:
            ValidationError for every violation found
        """
        return self.validator.iter_errors(data)


class MagnitudeValidator(ContractValidator):
    """Validator of the magnitude contract."""

    def __init__(self):
        super().__init__("magnitude")


class SignedIntegerValidator(ContractValidator):
    """Validator of the signed_integer contract."""

    def __init__(self):
        super().__init__("signed_integer")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_magnitude(data: Dict[str, Any]) -> None:
    """
    Validate serialized magnitude data.

    Raises:
        ValidationError: If data violates the magnitude contract
    """
    MagnitudeValidator().validate(data)


def validate_signed_integer(data: Dict[str, Any]) -> None:
    """
    Validate serialized signed integer data.

    Raises:
        ValidationError: If data violates the signed_integer contract
    """
    SignedIntegerValidator().validate(data)


__all__ = [
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "MagnitudeValidator",
    "SignedIntegerValidator",
    "ValidationError",
    "validate_magnitude",
    "validate_signed_integer",
]
