"""Infrastructure errors – failures raised by codecs while writing events."""

from __future__ import annotations

from typing import Any

from mp_cloudevents.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Codec / transport failure that is not an envelope rule violation."""

    default_code = "infrastructure_error"


class StructuredWriteError(InfrastructureError):
    """A context writer rejected an attribute (illegal character, unsupported type, …).

    Raised by codecs; ``read_context`` propagates it unchanged.
    """

    default_code = "structured_write_error"

    def __init__(
        self,
        message: str,
        *,
        attribute: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.attribute = attribute


__all__ = ["InfrastructureError", "StructuredWriteError"]
