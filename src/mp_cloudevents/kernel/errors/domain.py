"""Domain errors – envelope construction and attribute lookup failures."""

from __future__ import annotations

from typing import Any

from mp_cloudevents.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an envelope rule is violated."""

    default_code = "domain_error"


class UnknownAttributeError(DomainError):
    """``get_attribute`` was called with a name the spec version does not declare."""

    default_code = "unknown_attribute"

    def __init__(self, attribute: str, spec_version: Any, **kwargs: Any) -> None:
        version = getattr(spec_version, "value", spec_version)
        super().__init__(
            f"Spec version v{version} doesn't have attribute named '{attribute}'",
            detail={"attribute": attribute, "spec_version": str(version)},
            **kwargs,
        )
        self.attribute = attribute
        self.spec_version = spec_version


class ValidationError(DomainError):
    """Envelope data does not meet construction rules.

    ``errors`` is a list of attribute-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class TypeRejectedError(ValidationError):
    """An extension value outside the closed extension type set."""

    default_code = "type_rejected"

    def __init__(self, name: str | None, value: Any, **kwargs: Any) -> None:
        target = f"extension '{name}'" if name else "extension value"
        super().__init__(
            f"Invalid value type for {target}: {type(value).__name__}",
            errors=[{"attribute": name, "type": type(value).__name__}],
            **kwargs,
        )
        self.name = name
        self.value = value


class MissingMandatoryAttributeError(ValidationError):
    """One or more mandatory attributes are absent at build time."""

    default_code = "missing_mandatory_attribute"

    def __init__(self, attributes: list[str], spec_version: Any, **kwargs: Any) -> None:
        version = getattr(spec_version, "value", spec_version)
        names = ", ".join(attributes)
        super().__init__(
            f"Attribute(s) '{names}' cannot be null for spec version v{version}",
            errors=[{"attribute": a, "reason": "missing"} for a in attributes],
            **kwargs,
        )
        self.attributes = list(attributes)
        self.spec_version = spec_version


class InvalidExtensionNameError(ValidationError):
    """Extension names are restricted to lowercase ASCII letters and digits."""

    default_code = "invalid_extension_name"

    def __init__(
        self,
        name: object,
        *,
        reason: str = "only [a-z0-9] characters are allowed",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid extension name {name!r}: {reason}",
            errors=[{"attribute": name, "reason": "invalid_name"}],
            **kwargs,
        )
        self.name = name


class ReservedAttributeNameError(ValidationError):
    """An extension key collides with a fixed attribute of the spec version."""

    default_code = "reserved_attribute_name"

    def __init__(self, name: str, spec_version: Any, **kwargs: Any) -> None:
        version = getattr(spec_version, "value", spec_version)
        super().__init__(
            f"Extension '{name}' collides with a fixed attribute of spec version v{version}",
            errors=[{"attribute": name, "reason": "reserved"}],
            **kwargs,
        )
        self.name = name
        self.spec_version = spec_version


class InvalidAttributeValueError(ValidationError):
    """A fixed attribute received a value of the wrong shape."""

    default_code = "invalid_attribute_value"

    def __init__(self, name: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid value for attribute '{name}': {reason}",
            errors=[{"attribute": name, "reason": reason}],
            **kwargs,
        )
        self.name = name
        self.value = value
        self.reason = reason


class InvalidSpecVersionError(ValidationError):
    """The given text does not name a supported spec version."""

    default_code = "invalid_spec_version"

    def __init__(self, value: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid specversion '{value}'", **kwargs)
        self.value = value


__all__ = [
    "DomainError",
    "InvalidAttributeValueError",
    "InvalidExtensionNameError",
    "InvalidSpecVersionError",
    "MissingMandatoryAttributeError",
    "ReservedAttributeNameError",
    "TypeRejectedError",
    "UnknownAttributeError",
    "ValidationError",
]
