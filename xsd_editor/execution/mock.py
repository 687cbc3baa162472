# xsd_editor/execution/mock.py
"""
In-memory stand-in for the host's document executor.

The tree is an arena of nodes keyed by their address. Positions are the
index of a node among its parent's children of the same kind, so removing
or renaming a node re-addresses its siblings and their descendants.
Children of the document root get top-level addresses (/element:person).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from xsd_editor.addressing import ROOT_ADDRESS, IdGenerationParams, NodeKind, generate_address, is_root_address
from xsd_editor.commands import AnyCommand, CommandType
from xsd_editor.errors import ExecutionError

logger = logging.getLogger(__name__)


class SchemaNode(BaseModel):
    address: str
    kind: NodeKind
    name: Optional[str] = None
    parent: Optional[str] = None
    children: List[str] = Field(default_factory=list)
    properties: Dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class _Family:
    kind: NodeKind
    label: str
    id_field: str
    name_fields: Tuple[str, ...] = ()
    parent_field: Optional[str] = None
    parent_label: str = "element"
    # Fields dropped when a ref is set, and vice versa.
    named_fields: Tuple[str, ...] = ()


ELEMENT = _Family(
    NodeKind.ELEMENT, "Element", "element_id", ("element_name", "ref"), "parent_id",
    named_fields=("element_name", "element_type"),
)
ATTRIBUTE = _Family(
    NodeKind.ATTRIBUTE, "Attribute", "attribute_id", ("attribute_name", "ref"), "parent_id",
    named_fields=("attribute_name", "attribute_type", "default_value", "fixed_value"),
)
SIMPLE_TYPE = _Family(NodeKind.SIMPLE_TYPE, "Simple type", "type_id", ("type_name",))
COMPLEX_TYPE = _Family(NodeKind.COMPLEX_TYPE, "Complex type", "type_id", ("type_name",))
GROUP = _Family(NodeKind.GROUP, "Group", "group_id", ("group_name",))
ATTRIBUTE_GROUP = _Family(NodeKind.ATTRIBUTE_GROUP, "Attribute group", "group_id", ("group_name",))
ANNOTATION = _Family(NodeKind.ANNOTATION, "Annotation", "annotation_id", (), "target_id", "node")
DOCUMENTATION = _Family(NodeKind.DOCUMENTATION, "Documentation", "documentation_id", (), "target_id", "node")
IMPORT = _Family(NodeKind.IMPORT, "Import", "import_id")
INCLUDE = _Family(NodeKind.INCLUDE, "Include", "include_id")

OPERATIONS: Dict[CommandType, Tuple[str, _Family]] = {
    CommandType.ADD_ELEMENT: ("add", ELEMENT),
    CommandType.REMOVE_ELEMENT: ("remove", ELEMENT),
    CommandType.MODIFY_ELEMENT: ("modify", ELEMENT),
    CommandType.ADD_ATTRIBUTE: ("add", ATTRIBUTE),
    CommandType.REMOVE_ATTRIBUTE: ("remove", ATTRIBUTE),
    CommandType.MODIFY_ATTRIBUTE: ("modify", ATTRIBUTE),
    CommandType.ADD_SIMPLE_TYPE: ("add", SIMPLE_TYPE),
    CommandType.REMOVE_SIMPLE_TYPE: ("remove", SIMPLE_TYPE),
    CommandType.MODIFY_SIMPLE_TYPE: ("modify", SIMPLE_TYPE),
    CommandType.ADD_COMPLEX_TYPE: ("add", COMPLEX_TYPE),
    CommandType.REMOVE_COMPLEX_TYPE: ("remove", COMPLEX_TYPE),
    CommandType.MODIFY_COMPLEX_TYPE: ("modify", COMPLEX_TYPE),
    CommandType.ADD_GROUP: ("add", GROUP),
    CommandType.REMOVE_GROUP: ("remove", GROUP),
    CommandType.MODIFY_GROUP: ("modify", GROUP),
    CommandType.ADD_ATTRIBUTE_GROUP: ("add", ATTRIBUTE_GROUP),
    CommandType.REMOVE_ATTRIBUTE_GROUP: ("remove", ATTRIBUTE_GROUP),
    CommandType.MODIFY_ATTRIBUTE_GROUP: ("modify", ATTRIBUTE_GROUP),
    CommandType.ADD_ANNOTATION: ("add", ANNOTATION),
    CommandType.REMOVE_ANNOTATION: ("remove", ANNOTATION),
    CommandType.MODIFY_ANNOTATION: ("modify", ANNOTATION),
    CommandType.ADD_DOCUMENTATION: ("add", DOCUMENTATION),
    CommandType.REMOVE_DOCUMENTATION: ("remove", DOCUMENTATION),
    CommandType.MODIFY_DOCUMENTATION: ("modify", DOCUMENTATION),
    CommandType.ADD_IMPORT: ("add", IMPORT),
    CommandType.REMOVE_IMPORT: ("remove", IMPORT),
    CommandType.MODIFY_IMPORT: ("modify", IMPORT),
    CommandType.ADD_INCLUDE: ("add", INCLUDE),
    CommandType.REMOVE_INCLUDE: ("remove", INCLUDE),
    CommandType.MODIFY_INCLUDE: ("modify", INCLUDE),
}


class MockSchemaExecutor:
    """
    Applies validated commands to an in-memory schema tree.
    Every successful command returns {"address": <address of the affected node>}.
    """

    def __init__(self):
        self.nodes: Dict[str, SchemaNode] = {
            ROOT_ADDRESS: SchemaNode(address=ROOT_ADDRESS, kind=NodeKind.SCHEMA)
        }

    @property
    def root(self) -> SchemaNode:
        return self.nodes[ROOT_ADDRESS]

    def execute(self, command: AnyCommand) -> Optional[Dict[str, Any]]:
        operation, family = OPERATIONS[CommandType(command.type)]
        logger.debug(f"Executing {command.type} ({operation} {family.label})")
        if operation == "add":
            return self._add(family, command.payload)
        if operation == "remove":
            return self._remove(family, command.payload)
        return self._modify(family, command.payload)

    def snapshot(self, address: str = ROOT_ADDRESS) -> Dict[str, Any]:
        """Nested dict view of the subtree at `address`, as sent in updateSchema."""
        node = self.nodes[address]
        return {
            "address": node.address,
            "kind": node.kind.value,
            "name": node.name,
            "properties": dict(node.properties),
            "children": [self.snapshot(child) for child in node.children],
        }

    # --- Operations ---

    def _add(self, family: _Family, payload) -> Dict[str, Any]:
        parent_address = getattr(payload, family.parent_field) if family.parent_field else ROOT_ADDRESS
        if is_root_address(parent_address):
            parent_address = ROOT_ADDRESS
        parent = self.nodes.get(parent_address)
        if parent is None:
            raise ExecutionError(
                f"Parent {family.parent_label} not found: {parent_address}", code="PARENT_NOT_FOUND"
            )

        properties = payload.model_dump(exclude_none=True)
        if family.parent_field:
            properties.pop(family.parent_field, None)

        name = self._name_from(family, properties)
        position = sum(1 for child in parent.children if self.nodes[child].kind == family.kind)
        address = self._address_for(parent.address, family.kind, name, position)
        if address in self.nodes:
            raise ExecutionError(f"{family.label} already exists: {address}", code="DUPLICATE")

        node = SchemaNode(
            address=address,
            kind=family.kind,
            name=name,
            parent=parent.address,
            properties=properties,
        )
        self.nodes[address] = node
        parent.children.append(address)
        logger.info(f"Added {family.label.lower()} at {address}")
        return {"address": address}

    def _remove(self, family: _Family, payload) -> Dict[str, Any]:
        node = self._require(family, getattr(payload, family.id_field))
        removed = node.address
        parent = self.nodes[node.parent]

        self._drop_subtree(node)
        parent.children.remove(removed)
        self._readdress_children(parent)
        logger.info(f"Removed {family.label.lower()} at {removed}")
        return {"address": removed}

    def _modify(self, family: _Family, payload) -> Dict[str, Any]:
        node = self._require(family, getattr(payload, family.id_field))
        patch = payload.model_dump(exclude_none=True, exclude={family.id_field})

        if family.named_fields:
            name_field = family.named_fields[0]
            replaces_ref = "ref" in node.properties and "ref" not in patch
            if replaces_ref and any(field in patch for field in family.named_fields) and name_field not in patch:
                raise ExecutionError(
                    f"{family.label} name is required when replacing a reference: {node.address}",
                    code="NAME_REQUIRED",
                )
            if "ref" in patch:
                for field in family.named_fields:
                    node.properties.pop(field, None)
            elif any(field in patch for field in family.named_fields):
                node.properties.pop("ref", None)

        node.properties.update(patch)
        new_name = self._name_from(family, patch)

        if new_name is not None and new_name != node.name:
            parent = self.nodes[node.parent]
            if parent.address == ROOT_ADDRESS:
                candidate = self._address_for(ROOT_ADDRESS, family.kind, new_name, 0)
                if candidate in self.nodes:
                    raise ExecutionError(f"{family.label} already exists: {candidate}", code="DUPLICATE")
            node.name = new_name
            self._readdress_children(parent)

        logger.info(f"Modified {family.label.lower()} at {node.address}")
        return {"address": node.address}

    # --- Arena helpers ---

    def _require(self, family: _Family, address: str) -> SchemaNode:
        node = self.nodes.get(address)
        if node is None or node.kind != family.kind:
            raise ExecutionError(f"{family.label} not found: {address}", code="NOT_FOUND")
        return node

    @staticmethod
    def _name_from(family: _Family, values: Dict[str, Any]) -> Optional[str]:
        for field in family.name_fields:
            if values.get(field):
                return values[field]
        return None

    @staticmethod
    def _address_for(parent_address: str, kind: NodeKind, name: Optional[str], position: int) -> str:
        if parent_address == ROOT_ADDRESS:
            # Named top-level nodes are unique by name; others by position.
            if name:
                return generate_address(IdGenerationParams(kind=kind, name=name))
            return generate_address(IdGenerationParams(kind=kind, position=position))
        return generate_address(
            IdGenerationParams(kind=kind, name=name, parent_id=parent_address, position=position)
        )

    def _drop_subtree(self, node: SchemaNode) -> None:
        for child in node.children:
            self._drop_subtree(self.nodes[child])
        del self.nodes[node.address]

    def _readdress_children(self, parent: SchemaNode) -> None:
        children = [self.nodes.pop(address) for address in parent.children]
        counters: Dict[NodeKind, int] = {}
        parent.children = []

        for child in children:
            position = counters.get(child.kind, 0)
            counters[child.kind] = position + 1
            child.address = self._address_for(parent.address, child.kind, child.name, position)
            child.parent = parent.address
            self.nodes[child.address] = child
            parent.children.append(child.address)
            self._readdress_children(child)
