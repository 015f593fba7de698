"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from mp_cloudevents.config.settings.base import Settings
from mp_cloudevents.config.validation import InvalidSettingValueError

# bool is an int subclass, so these are compared by exact type
_SCALARS = (str, bool, int)


class SettingsValidator:
    """Check a populated settings instance against its declared fields.

    Reports required fields left as ``None`` and scalar fields (``str``,
    ``bool``, ``int``) holding a value of another type, e.g. a raw ``"no"``
    passed where a ``bool`` was declared.
    """

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages."""
        return [f"{name} {reason}" for name, _, reason in self._problems(settings)]

    def ensure_valid(self, settings: Settings) -> None:
        """Raise :class:`InvalidSettingValueError` for the first problem found."""
        for name, value, reason in self._problems(settings):
            raise InvalidSettingValueError(name, value, reason)

    def _problems(self, settings: Settings) -> list[tuple[str, object, str]]:
        types = type(settings).field_types()
        problems: list[tuple[str, object, str]] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None:
                if field.default is dataclasses.MISSING:
                    problems.append((field.name, value, "is required but None"))
                continue
            expected = types.get(field.name)
            if expected in _SCALARS and type(value) is not expected:
                problems.append(
                    (field.name, value, f"must be {expected.__name__}, got {type(value).__name__}")
                )
        return problems


__all__ = ["SettingsValidator"]
