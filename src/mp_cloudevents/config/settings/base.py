"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Each field maps to the environment variable ``<PREFIX>_<FIELD>``
    (upper-cased); a subclass sets ``_prefix`` and may override
    :meth:`_validate` for cross-field rules.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def field_types(cls) -> dict[str, Any]:
        """Resolved annotation of every dataclass field, by field name."""
        hints = typing.get_type_hints(cls)
        return {field.name: hints.get(field.name) for field in dataclasses.fields(cls)}


__all__ = ["Settings"]
