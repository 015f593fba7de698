"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── UnknownAttributeError
    │   └── ValidationError
    │       ├── TypeRejectedError
    │       ├── MissingMandatoryAttributeError
    │       ├── InvalidExtensionNameError
    │       ├── ReservedAttributeNameError
    │       ├── InvalidAttributeValueError
    │       └── InvalidSpecVersionError
    └── InfrastructureError  (infrastructure.py)
        └── StructuredWriteError
"""

from mp_cloudevents.kernel.errors.base import BaseError
from mp_cloudevents.kernel.errors.domain import (
    DomainError,
    InvalidAttributeValueError,
    InvalidExtensionNameError,
    InvalidSpecVersionError,
    MissingMandatoryAttributeError,
    ReservedAttributeNameError,
    TypeRejectedError,
    UnknownAttributeError,
    ValidationError,
)
from mp_cloudevents.kernel.errors.infrastructure import (
    InfrastructureError,
    StructuredWriteError,
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
