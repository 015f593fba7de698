"""Config settings – CloudEventSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_cloudevents.config.settings.base import Settings
from mp_cloudevents.config.validation import InvalidSettingValueError
from mp_cloudevents.core.spec_version import SpecVersion
from mp_cloudevents.kernel.errors import InvalidSpecVersionError


@dataclasses.dataclass
class CloudEventSettings(Settings):
    """Builder defaults, read from ``CLOUDEVENTS_*`` environment variables.

    * ``CLOUDEVENTS_DEFAULT_SPEC_VERSION`` – ``"0.3"`` or ``"1.0"``
    * ``CLOUDEVENTS_STRICT_EXTENSION_NAMES`` – enforce ``[a-z0-9]+`` names
    """

    _prefix: ClassVar[str] = "CLOUDEVENTS"

    default_spec_version: str = SpecVersion.V1.value
    strict_extension_names: bool = True

    def _validate(self) -> None:
        try:
            SpecVersion.parse(self.default_spec_version)
        except InvalidSpecVersionError as exc:
            raise InvalidSettingValueError(
                "default_spec_version",
                self.default_spec_version,
                f"expected one of {[v.value for v in SpecVersion]}",
            ) from exc

    @property
    def spec_version(self) -> SpecVersion:
        return SpecVersion.parse(self.default_spec_version)


__all__ = ["CloudEventSettings"]
