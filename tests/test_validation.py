# tests/test_validation.py

import pytest

from xsd_editor.commands import CommandType, parse_command
from xsd_editor.validation import (
    VALIDATORS,
    CommandValidator,
    is_valid_type_reference,
    is_valid_xml_name,
    validate_max_occurs,
    validate_min_occurs,
    validate_occurrences,
)


@pytest.fixture
def validator() -> CommandValidator:
    return CommandValidator()


def check(validator, raw):
    return validator.validate(parse_command(raw))


class TestValidationUtils:

    @pytest.mark.parametrize("name", ["person", "_private", "first-name", "a_b-c.d", "x1", "A"])
    def test_valid_xml_names(self, name):
        assert is_valid_xml_name(name)

    @pytest.mark.parametrize("name", ["", "   ", "1abc", "-abc", ".abc", "has space", "xs:element", None])
    def test_invalid_xml_names(self, name):
        assert not is_valid_xml_name(name)

    def test_type_reference_allows_prefix(self):
        assert is_valid_type_reference("xs:string")
        assert is_valid_type_reference("AddressType")
        assert not is_valid_type_reference("xs:")
        assert not is_valid_type_reference("a:b:c")

    def test_min_occurs(self):
        assert validate_min_occurs(None).valid
        assert validate_min_occurs(0).valid
        assert validate_min_occurs(3).valid

        negative = validate_min_occurs(-1)
        assert not negative.valid
        assert negative.error == "minOccurs must be a non-negative integer"

        fractional = validate_min_occurs(1.5)
        assert not fractional.valid
        assert fractional.error == "minOccurs must be an integer"

    def test_max_occurs(self):
        assert validate_max_occurs(None).valid
        assert validate_max_occurs("unbounded").valid
        assert validate_max_occurs(0).valid
        assert not validate_max_occurs(1.5).valid
        assert not validate_max_occurs(-2).valid
        assert not validate_max_occurs("many").valid

    def test_occurrences(self):
        result = validate_occurrences(10, 5)
        assert not result.valid
        assert result.error == "minOccurs must be <= maxOccurs"

        assert validate_occurrences(10, "unbounded").valid
        assert validate_occurrences(2, 2).valid
        assert validate_occurrences(None, 0).valid

    def test_occurrences_reports_individual_failure_first(self):
        result = validate_occurrences(-1, -5)
        assert result.error == "minOccurs must be a non-negative integer"
        result = validate_occurrences(1, 0.5)
        assert result.error == "maxOccurs must be an integer or 'unbounded'"

    def test_validators_do_not_mutate(self, validator):
        command = parse_command({"type": "addElement", "payload": {"parentId": " /x", "elementName": "a"}})
        before = command.model_dump()
        validator.validate(command)
        assert command.model_dump() == before


class TestElementValidators:

    def test_valid_named_element(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/element:person", "elementName": "address", "elementType": "AddressType",
            "minOccurs": 0, "maxOccurs": "unbounded",
        }})
        assert result.valid
        assert result.error is None

    def test_invalid_name(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/element:person", "elementName": "1address", "elementType": "xs:string",
        }})
        assert result.error == "Element name must be a valid XML name"

    def test_type_required(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/element:person", "elementName": "address",
        }})
        assert result.error == "Element type is required"

    def test_ref_excludes_name_and_type(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/complexType:T", "ref": "person", "elementName": "x",
        }})
        assert result.error == "A reference element cannot have a name or type"

    def test_ref_allowed_below_root(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/complexType:T", "ref": "person", "maxOccurs": 3,
        }})
        assert result.valid

    def test_ref_forbidden_at_root(self, validator):
        result = check(validator, {"type": "addElement", "payload": {"parentId": "/schema", "ref": "person"}})
        assert result.error == "Top-level elements cannot be references"

    def test_bare_root_alias_is_a_valid_parent(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "schema", "elementName": "person", "elementType": "xs:string",
        }})
        assert result.valid

    def test_ref_forbidden_at_bare_root_alias(self, validator):
        result = check(validator, {"type": "addElement", "payload": {"parentId": "schema", "ref": "person"}})
        assert result.error == "Top-level elements cannot be references"

    def test_occurrence_range(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "/element:a", "elementName": "b", "elementType": "xs:int", "minOccurs": 10, "maxOccurs": 5,
        }})
        assert result.error == "minOccurs must be <= maxOccurs"

    def test_empty_parent(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "  ", "elementName": "b", "elementType": "xs:int",
        }})
        assert result.error == "Parent ID cannot be empty"

    def test_malformed_parent_does_not_raise(self, validator):
        result = check(validator, {"type": "addElement", "payload": {
            "parentId": "element:a", "elementName": "b", "elementType": "xs:int",
        }})
        assert not result.valid
        assert result.error == "Invalid parent ID: element:a"

    def test_modify_partial_patch(self, validator):
        assert check(validator, {"type": "modifyElement", "payload": {
            "elementId": "/element:a/element:b[0]", "maxOccurs": "unbounded",
        }}).valid
        assert check(validator, {"type": "modifyElement", "payload": {
            "elementId": "/element:a/element:b[0]", "ref": "c", "elementType": "xs:int",
        }}).error == "Cannot set both ref and name/type on an element"
        assert check(validator, {"type": "modifyElement", "payload": {
            "elementId": "/element:a", "elementName": "-bad",
        }}).error == "Element name must be a valid XML name"


class TestAttributeValidators:

    def test_valid_named_attribute(self, validator):
        assert check(validator, {"type": "addAttribute", "payload": {
            "parentId": "/element:person", "attributeName": "id", "attributeType": "xs:ID", "required": True,
        }}).valid

    def test_default_and_fixed_are_exclusive(self, validator):
        result = check(validator, {"type": "addAttribute", "payload": {
            "parentId": "/element:person", "attributeName": "lang", "defaultValue": "en", "fixedValue": "de",
        }})
        assert result.error == "An attribute cannot have both a default value and a fixed value"

    def test_ref_with_required_flag(self, validator):
        assert check(validator, {"type": "addAttribute", "payload": {
            "parentId": "/element:person", "ref": "lang", "required": True,
        }}).valid

    def test_ref_cannot_have_default(self, validator):
        result = check(validator, {"type": "addAttribute", "payload": {
            "parentId": "/element:person", "ref": "lang", "defaultValue": "en",
        }})
        assert result.error == "A reference attribute cannot have a default or fixed value"

    def test_ref_forbidden_at_root(self, validator):
        result = check(validator, {"type": "addAttribute", "payload": {"parentId": "/schema", "ref": "lang"}})
        assert result.error == "Top-level attributes cannot be references"

    def test_bare_root_alias_is_a_valid_parent(self, validator):
        assert check(validator, {"type": "addAttribute", "payload": {
            "parentId": "schema", "attributeName": "lang", "attributeType": "xs:language",
        }}).valid

    def test_modify_default_and_fixed(self, validator):
        result = check(validator, {"type": "modifyAttribute", "payload": {
            "attributeId": "/element:a/attribute:b[0]", "defaultValue": "1", "fixedValue": "2",
        }})
        assert result.error == "An attribute cannot have both a default value and a fixed value"


class TestTypeAndGroupValidators:

    def test_simple_type(self, validator):
        assert check(validator, {"type": "addSimpleType", "payload": {
            "typeName": "Code", "baseType": "xs:string",
        }}).valid
        assert check(validator, {"type": "addSimpleType", "payload": {
            "typeName": "9Code", "baseType": "xs:string",
        }}).error == "Type name must be a valid XML name"
        assert check(validator, {"type": "addSimpleType", "payload": {
            "typeName": "Code", "baseType": " ",
        }}).error == "Base type is required"

    def test_complex_type_content_model(self, validator):
        for model in ("sequence", "choice", "all"):
            assert check(validator, {"type": "addComplexType", "payload": {
                "typeName": "T", "contentModel": model, "abstract": True, "mixed": False,
            }}).valid
        result = check(validator, {"type": "addComplexType", "payload": {"typeName": "T", "contentModel": "bag"}})
        assert result.error == "Content model must be one of: sequence, choice, all"
        result = check(validator, {"type": "addComplexType", "payload": {"typeName": "T", "contentModel": ""}})
        assert result.error == "Content model is required"

    def test_group(self, validator):
        assert check(validator, {"type": "addGroup", "payload": {"groupName": "G", "contentModel": "choice"}}).valid
        assert check(validator, {"type": "addGroup", "payload": {
            "groupName": "G", "contentModel": "any",
        }}).error == "Content model must be one of: sequence, choice, all"
        assert check(validator, {"type": "modifyGroup", "payload": {
            "groupId": "/group:G", "contentModel": "list",
        }}).error == "Content model must be one of: sequence, choice, all"

    def test_attribute_group(self, validator):
        assert check(validator, {"type": "addAttributeGroup", "payload": {"groupName": "Common"}}).valid
        assert check(validator, {"type": "addAttributeGroup", "payload": {
            "groupName": "",
        }}).error == "Attribute group name must be a valid XML name"


class TestMetadataAndModuleValidators:

    def test_annotation_and_documentation(self, validator):
        assert check(validator, {"type": "addAnnotation", "payload": {
            "targetId": "/element:person", "appInfo": "<x/>",
        }}).valid
        assert check(validator, {"type": "addDocumentation", "payload": {
            "targetId": "/element:person", "content": "A person", "lang": "en",
        }}).valid
        assert check(validator, {"type": "addDocumentation", "payload": {
            "targetId": "", "content": "A person",
        }}).error == "Target ID cannot be empty"

    def test_import_and_include(self, validator):
        assert check(validator, {"type": "addImport", "payload": {
            "namespace": "http://example.com/ns", "schemaLocation": "ns.xsd",
        }}).valid
        assert check(validator, {"type": "addImport", "payload": {
            "namespace": " ", "schemaLocation": "ns.xsd",
        }}).error == "Namespace cannot be empty"
        assert check(validator, {"type": "addInclude", "payload": {
            "schemaLocation": "",
        }}).error == "Schema location cannot be empty"


ID_FIELDS = {
    "Element": "elementId",
    "Attribute": "attributeId",
    "SimpleType": "typeId",
    "ComplexType": "typeId",
    "Group": "groupId",
    "AttributeGroup": "groupId",
    "Annotation": "annotationId",
    "Documentation": "documentationId",
    "Import": "importId",
    "Include": "includeId",
}


@pytest.mark.parametrize("operation", ["remove", "modify"])
@pytest.mark.parametrize("family", sorted(ID_FIELDS))
@pytest.mark.parametrize("target", ["", "   "])
def test_remove_and_modify_reject_blank_target(validator, operation, family, target):
    result = check(validator, {"type": f"{operation}{family}", "payload": {ID_FIELDS[family]: target}})
    assert result.valid is False
    assert result.error.endswith("ID cannot be empty")


def test_dispatch_table_covers_every_command():
    assert set(VALIDATORS) == set(CommandType)
