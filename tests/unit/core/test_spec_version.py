"""Unit tests for SpecVersion."""

from __future__ import annotations

import pytest

from mp_cloudevents.core import SpecVersion
from mp_cloudevents.kernel.errors import InvalidSpecVersionError


class TestParse:
    @pytest.mark.parametrize(("text", "member"), [("0.3", SpecVersion.V03), ("1.0", SpecVersion.V1)])
    def test_known_versions(self, text: str, member: SpecVersion) -> None:
        assert SpecVersion.parse(text) is member

    def test_member_passes_through(self) -> None:
        assert SpecVersion.parse(SpecVersion.V1) is SpecVersion.V1

    @pytest.mark.parametrize("text", ["1", "0.2", "2.0", "", "v1.0"])
    def test_unknown_raises(self, text: str) -> None:
        with pytest.raises(InvalidSpecVersionError):
            SpecVersion.parse(text)

    def test_str_is_value(self) -> None:
        assert str(SpecVersion.V03) == "0.3"
        assert f"{SpecVersion.V1}" == "1.0"


class TestAttributeSets:
    def test_v03_canonical_order(self) -> None:
        assert SpecVersion.V03.attribute_names() == (
            "id", "source", "type", "datacontenttype", "schemaurl", "subject", "time",
        )

    def test_v1_canonical_order(self) -> None:
        assert SpecVersion.V1.attribute_names() == (
            "id", "source", "type", "datacontenttype", "dataschema", "subject", "time",
        )

    def test_mandatory_same_in_every_version(self) -> None:
        for version in SpecVersion:
            assert version.mandatory_attributes == ("specversion", "id", "source", "type")

    def test_all_attributes_is_mandatory_plus_optional(self) -> None:
        for version in SpecVersion:
            expected = set(version.mandatory_attributes) | set(version.optional_attributes)
            assert version.all_attributes == expected

    def test_v03_knows_reserved_datacontentencoding(self) -> None:
        assert SpecVersion.V03.is_known("datacontentencoding")
        assert not SpecVersion.V1.is_known("datacontentencoding")

    def test_schema_attribute_differs_by_version(self) -> None:
        assert SpecVersion.V03.is_known("schemaurl")
        assert not SpecVersion.V03.is_known("dataschema")
        assert SpecVersion.V1.is_known("dataschema")
        assert not SpecVersion.V1.is_known("schemaurl")

    def test_specversion_is_known(self) -> None:
        assert all(v.is_known("specversion") for v in SpecVersion)
        assert not SpecVersion.V1.is_known("notreal")
