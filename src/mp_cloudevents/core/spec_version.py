"""Version Descriptor – the closed set of supported CloudEvents spec versions."""

from __future__ import annotations

from enum import Enum

from mp_cloudevents.kernel.errors.domain import InvalidSpecVersionError

SPECVERSION = "specversion"
ID = "id"
SOURCE = "source"
TYPE = "type"
DATACONTENTTYPE = "datacontenttype"
DATACONTENTENCODING = "datacontentencoding"
SCHEMAURL = "schemaurl"
DATASCHEMA = "dataschema"
SUBJECT = "subject"
TIME = "time"

_MANDATORY: tuple[str, ...] = (SPECVERSION, ID, SOURCE, TYPE)

_OPTIONAL: dict[str, tuple[str, ...]] = {
    "0.3": (DATACONTENTTYPE, DATACONTENTENCODING, SCHEMAURL, SUBJECT, TIME),
    "1.0": (DATACONTENTTYPE, DATASCHEMA, SUBJECT, TIME),
}

# Canonical traversal order of the attributes an envelope actually stores.
_CANONICAL_ORDER: dict[str, tuple[str, ...]] = {
    "0.3": (ID, SOURCE, TYPE, DATACONTENTTYPE, SCHEMAURL, SUBJECT, TIME),
    "1.0": (ID, SOURCE, TYPE, DATACONTENTTYPE, DATASCHEMA, SUBJECT, TIME),
}


class SpecVersion(str, Enum):
    """Supported CloudEvents specification versions.

    Each member owns the canonical ordered list of its fixed attributes::

        SpecVersion.V1.attribute_names()
        # ('id', 'source', 'type', 'datacontenttype', 'dataschema', 'subject', 'time')
    """

    V03 = "0.3"
    V1 = "1.0"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | SpecVersion") -> "SpecVersion":
        """Return the member whose value is *value*.

        Raises :class:`InvalidSpecVersionError` for anything else.
        """
        if isinstance(value, SpecVersion):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise InvalidSpecVersionError(str(value))

    @property
    def mandatory_attributes(self) -> tuple[str, ...]:
        return _MANDATORY

    @property
    def optional_attributes(self) -> tuple[str, ...]:
        return _OPTIONAL[self.value]

    @property
    def all_attributes(self) -> frozenset[str]:
        """Every name this version declares, including ``specversion``."""
        return frozenset(_MANDATORY + _OPTIONAL[self.value])

    def attribute_names(self) -> tuple[str, ...]:
        """Stored fixed attributes in canonical traversal order."""
        return _CANONICAL_ORDER[self.value]

    def is_known(self, name: str) -> bool:
        return name in self.all_attributes


__all__ = [
    "DATACONTENTENCODING",
    "DATACONTENTTYPE",
    "DATASCHEMA",
    "ID",
    "SCHEMAURL",
    "SOURCE",
    "SPECVERSION",
    "SUBJECT",
    "TIME",
    "TYPE",
    "SpecVersion",
]
