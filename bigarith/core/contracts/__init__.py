"""
Contract Validation Module

JSON Schema contracts of the serialized big integer records.
"""

from .validators import (
    ContractValidator,
    MagnitudeValidator,
    SchemaLoader,
    SignedIntegerValidator,
    validate_magnitude,
    validate_signed_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MagnitudeValidator",
    "SignedIntegerValidator",
    # Functions
    "validate_magnitude",
    "validate_signed_integer",
]
