"""Kernel – envelope-agnostic building blocks (errors, value types)."""

from mp_cloudevents.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidAttributeValueError,
    InvalidExtensionNameError,
    InvalidSpecVersionError,
    MissingMandatoryAttributeError,
    ReservedAttributeNameError,
    StructuredWriteError,
    TypeRejectedError,
    UnknownAttributeError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidAttributeValueError",
    "InvalidExtensionNameError",
    "InvalidSpecVersionError",
    "MissingMandatoryAttributeError",
    "ReservedAttributeNameError",
    "StructuredWriteError",
    "TypeRejectedError",
    "UnknownAttributeError",
    "ValidationError",
]
