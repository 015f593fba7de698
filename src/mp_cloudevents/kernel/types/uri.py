"""URI value object used by URI-typed attributes and extensions."""

from __future__ import annotations

import dataclasses
import re
from urllib.parse import urlsplit

from mp_cloudevents.kernel.errors.domain import ValidationError

_FORBIDDEN_RE = re.compile(r"[\s\x00-\x1f\x7f]")


@dataclasses.dataclass(frozen=True, slots=True)
class URI:
    """An immutable URI-reference (absolute or relative).

    Equality is by the exact text, so ``URI("http://a/b") != URI("HTTP://a/b")``.

    Example::

        source = URI.parse("https://example.com/source")
        str(source)  # 'https://example.com/source'
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationError(f"Invalid URI: {self.value!r}")
        if _FORBIDDEN_RE.search(self.value):
            raise ValidationError(f"Invalid URI: {self.value!r} contains whitespace or control characters")
        try:
            urlsplit(self.value)
        except ValueError as exc:
            raise ValidationError(f"Invalid URI: {self.value!r}", cause=exc) from exc

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | URI") -> "URI":
        """Return *value* as a :class:`URI`, parsing strings."""
        if isinstance(value, URI):
            return value
        return cls(value)

    @property
    def scheme(self) -> str:
        return urlsplit(self.value).scheme

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme)


__all__ = ["URI"]
