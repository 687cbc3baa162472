# tests/test_commands.py

import json

import pytest
from pydantic import ValidationError

from xsd_editor.commands import (
    COMMAND_CLASSES,
    AddComplexTypeCommand,
    AddElementCommand,
    AddElementPayload,
    AddSimpleTypeCommand,
    CommandResponse,
    CommandType,
    ModifyAttributeCommand,
    RemoveIncludeCommand,
    RestrictionFacets,
    parse_command,
)
from xsd_editor.errors import CommandFormatError

ALL_TAGS = [
    "addElement", "removeElement", "modifyElement",
    "addAttribute", "removeAttribute", "modifyAttribute",
    "addSimpleType", "removeSimpleType", "modifySimpleType",
    "addComplexType", "removeComplexType", "modifyComplexType",
    "addGroup", "removeGroup", "modifyGroup",
    "addAttributeGroup", "removeAttributeGroup", "modifyAttributeGroup",
    "addAnnotation", "removeAnnotation", "modifyAnnotation",
    "addDocumentation", "removeDocumentation", "modifyDocumentation",
    "addImport", "removeImport", "modifyImport",
    "addInclude", "removeInclude", "modifyInclude",
]


def test_command_tags_are_closed_and_unique():
    assert sorted(t.value for t in CommandType) == sorted(ALL_TAGS)
    assert len(set(ALL_TAGS)) == 30


def test_every_tag_has_a_class_with_matching_default_type():
    assert set(COMMAND_CLASSES) == set(CommandType)
    for command_type, command_cls in COMMAND_CLASSES.items():
        assert command_cls.model_fields["type"].default == command_type.value


def test_parse_add_element_from_wire_dict():
    command = parse_command({
        "type": "addElement",
        "payload": {
            "parentId": "/element:person",
            "elementName": "address",
            "elementType": "AddressType",
            "minOccurs": 0,
            "maxOccurs": "unbounded",
        },
    })
    assert isinstance(command, AddElementCommand)
    assert command.payload.parent_id == "/element:person"
    assert command.payload.element_name == "address"
    assert command.payload.max_occurs == "unbounded"


def test_parse_accepts_json_text():
    raw = json.dumps({"type": "removeInclude", "payload": {"includeId": "/include[0]"}})
    command = parse_command(raw)
    assert isinstance(command, RemoveIncludeCommand)
    assert command.payload.include_id == "/include[0]"


def test_parse_keeps_fractional_occurrence_for_validation():
    command = parse_command({
        "type": "addElement",
        "payload": {"parentId": "/element:a", "elementName": "b", "elementType": "xs:string", "maxOccurs": 1.5},
    })
    assert command.payload.max_occurs == 1.5


def test_snake_case_construction_dumps_camel_case():
    command = AddElementCommand(
        payload=AddElementPayload(parent_id="/element:person", element_name="address", element_type="AddressType")
    )
    wire = command.to_wire()
    assert wire == {
        "type": "addElement",
        "payload": {
            "parentId": "/element:person",
            "elementName": "address",
            "elementType": "AddressType",
        },
    }
    assert parse_command(wire) == command


def test_simple_type_with_facets():
    command = parse_command({
        "type": "addSimpleType",
        "payload": {
            "typeName": "Code",
            "baseType": "xs:string",
            "restrictions": {"maxLength": 8, "pattern": "[A-Z]+", "whiteSpace": "collapse", "enumeration": ["A", "B"]},
        },
    })
    assert isinstance(command, AddSimpleTypeCommand)
    facets = command.payload.restrictions
    assert facets.max_length == 8
    assert facets.white_space == "collapse"
    assert facets.enumeration == ["A", "B"]


def test_white_space_facet_is_enumerated():
    with pytest.raises(ValidationError):
        RestrictionFacets(white_space="squash")


def test_unknown_tag_is_format_error():
    with pytest.raises(CommandFormatError):
        parse_command({"type": "renameElement", "payload": {}})


def test_missing_required_payload_field_is_format_error():
    with pytest.raises(CommandFormatError):
        parse_command({"type": "removeElement", "payload": {}})


def test_invalid_json_is_format_error():
    with pytest.raises(CommandFormatError):
        parse_command("{not json")


def test_content_model_reaches_validation_untouched():
    command = parse_command({"type": "addComplexType", "payload": {"typeName": "T", "contentModel": "bag"}})
    assert isinstance(command, AddComplexTypeCommand)
    assert command.payload.content_model == "bag"


def test_modify_payload_fields_are_optional():
    command = parse_command({"type": "modifyAttribute", "payload": {"attributeId": "/element:a/attribute:id[0]"}})
    assert isinstance(command, ModifyAttributeCommand)
    assert command.payload.attribute_name is None
    assert command.payload.required is None


class TestCommandResponse:

    def test_ok_carries_data(self):
        response = CommandResponse.ok({"address": "/element:person/element:address[0]"})
        assert response.to_wire() == {"success": True, "data": {"address": "/element:person/element:address[0]"}}

    def test_fail_carries_error(self):
        response = CommandResponse.fail("Parent element not found: /element:nonexistent")
        assert response.to_wire() == {"success": False, "error": "Parent element not found: /element:nonexistent"}

    def test_failure_requires_error_text(self):
        with pytest.raises(ValidationError):
            CommandResponse(success=False)
        with pytest.raises(ValidationError):
            CommandResponse(success=False, error="   ")

    def test_success_cannot_carry_error(self):
        with pytest.raises(ValidationError):
            CommandResponse(success=True, error="boom")
