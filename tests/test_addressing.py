# tests/test_addressing.py

import pytest
from pydantic import ValidationError

from xsd_editor.addressing import (
    IdGenerationParams,
    NodeKind,
    generate_address,
    is_root_address,
    is_top_level,
    node_kind,
    node_name,
    parent_address,
    parse_address,
)
from xsd_editor.errors import FormatError


class TestGenerateAddress:

    def test_top_level_element(self):
        assert generate_address(IdGenerationParams(kind=NodeKind.ELEMENT, name="person")) == "/element:person"

    def test_child_element_with_position(self):
        params = IdGenerationParams(
            kind=NodeKind.ELEMENT, name="address", parent_id="/element:person", position=0
        )
        assert generate_address(params) == "/element:person/element:address[0]"

    def test_anonymous_complex_type(self):
        params = IdGenerationParams(
            kind=NodeKind.ANONYMOUS_COMPLEX_TYPE, parent_id="/element:person", position=0
        )
        assert generate_address(params) == "/element:person/anonymousComplexType[0]"

    def test_namespaced_name(self):
        params = IdGenerationParams(
            kind=NodeKind.ELEMENT, name="person", namespace="http://example.com/ns"
        )
        assert generate_address(params) == "/element:{http://example.com/ns}person"

    def test_bare_kind_without_name_or_position(self):
        assert generate_address(IdGenerationParams(kind=NodeKind.SCHEMA)) == "/schema"

    def test_empty_name_counts_as_no_name(self):
        params = IdGenerationParams(kind=NodeKind.IMPORT, name="", position=2)
        assert generate_address(params) == "/import[2]"

    def test_parent_without_leading_slash_is_normalized(self):
        params = IdGenerationParams(kind=NodeKind.ATTRIBUTE, name="id", parent_id="complexType:T", position=1)
        assert generate_address(params) == "/complexType:T/attribute:id[1]"

    def test_negative_position_rejected(self):
        with pytest.raises(ValidationError):
            IdGenerationParams(kind=NodeKind.ELEMENT, name="a", position=-1)


class TestParseAddress:

    def test_nested_element(self):
        parsed = parse_address("/element:person/element:address[0]")
        assert parsed.kind == NodeKind.ELEMENT
        assert parsed.name == "address"
        assert parsed.position == 0
        assert parsed.parent_id == "/element:person"
        assert parsed.namespace is None
        assert parsed.path == ["element:person", "element:address[0]"]

    def test_top_level_has_no_parent(self):
        parsed = parse_address("/complexType:PersonType")
        assert parsed.kind == NodeKind.COMPLEX_TYPE
        assert parsed.name == "PersonType"
        assert parsed.parent_id is None

    def test_namespace_with_slashes_and_colons(self):
        parsed = parse_address("/element:{http://example.com/a/b}person/element:{urn:x:y}child[3]")
        assert parsed.path == ["element:{http://example.com/a/b}person", "element:{urn:x:y}child[3]"]
        assert parsed.namespace == "urn:x:y"
        assert parsed.name == "child"
        assert parsed.position == 3
        assert parsed.parent_id == "/element:{http://example.com/a/b}person"

    def test_anonymous_node(self):
        parsed = parse_address("/element:person/anonymousSimpleType[1]")
        assert parsed.kind == NodeKind.ANONYMOUS_SIMPLE_TYPE
        assert parsed.name is None
        assert parsed.position == 1

    def test_bare_kind_is_not_expanded_into_a_name(self):
        parsed = parse_address("/schema")
        assert parsed.kind == NodeKind.SCHEMA
        assert parsed.name is None
        assert parsed.position is None

    @pytest.mark.parametrize("address", ["element:person", "", "schema", " /element:a"])
    def test_missing_leading_slash_is_format_error(self, address):
        with pytest.raises(FormatError):
            parse_address(address)

    def test_address_without_segments_is_format_error(self):
        with pytest.raises(FormatError):
            parse_address("/")

    def test_unparseable_position_folds_into_name(self):
        parsed = parse_address("/element:person[x]")
        assert parsed.name == "person[x]"
        assert parsed.position is None

    def test_unknown_kind_kept_verbatim(self):
        parsed = parse_address("/notation:foo")
        assert parsed.kind == "notation"
        assert parsed.name == "foo"


class TestRoundTrip:

    @pytest.mark.parametrize("params", [
        IdGenerationParams(kind=NodeKind.ELEMENT, name="person"),
        IdGenerationParams(kind=NodeKind.SIMPLE_TYPE, name="Code", namespace="http://example.com/types/v1"),
        IdGenerationParams(kind=NodeKind.ATTRIBUTE, name="lang", parent_id="/element:a/element:b[2]", position=0),
        IdGenerationParams(kind=NodeKind.ANNOTATION, parent_id="/complexType:T", position=4),
        IdGenerationParams(
            kind=NodeKind.ELEMENT, name="x", namespace="urn:a/b", parent_id="/element:{urn:a/b}root", position=7
        ),
        IdGenerationParams(kind=NodeKind.INCLUDE, position=0),
    ])
    def test_parse_reproduces_params(self, params):
        parsed = parse_address(generate_address(params))
        assert parsed.kind == params.kind
        assert parsed.name == params.name
        assert parsed.namespace == params.namespace
        assert parsed.position == params.position
        assert parsed.parent_id == params.parent_id


class TestProjections:

    def test_is_top_level(self):
        assert is_top_level("/element:person") is True
        assert is_top_level("/element:person/element:address[0]") is False

    def test_parent_address(self):
        assert parent_address("/element:person/element:address[0]") == "/element:person"
        assert parent_address("/element:person") is None

    def test_kind_and_name(self):
        assert node_kind("/complexType:PersonType") == NodeKind.COMPLEX_TYPE
        assert node_name("/element:person") == "person"
        assert node_name("/element:person/anonymousComplexType[0]") is None

    def test_projections_propagate_format_error(self):
        with pytest.raises(FormatError):
            is_top_level("element:person")

    def test_is_root_address(self):
        assert is_root_address("/schema")
        assert not is_root_address("/element:schema")
        assert not is_root_address("element:schema")

    def test_bare_root_alias(self):
        assert is_root_address("schema")


class TestPositionDigits:

    def test_non_ascii_digits_are_not_positions(self):
        parsed = parse_address("/element:a[٣]")
        assert parsed.position is None
        assert parsed.name == "a[٣]"

    def test_ascii_position(self):
        assert parse_address("/element:a[12]").position == 12
