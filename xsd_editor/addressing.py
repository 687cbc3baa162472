# xsd_editor/addressing.py
"""
Node addressing for schema documents.

Every node in the schema tree gets an XPath-like textual address that both
the editor and the host compute independently from structural facts alone:

- Top-level named nodes:   /element:person, /complexType:PersonType
- Nested, disambiguated:   /element:person/element:address[0]
- Anonymous nodes:         /element:person/anonymousComplexType[0]
- Namespaced names:        /element:{http://example.com/ns}person

A '/' between '{' and '}' belongs to the namespace, never to the path.
"""

import re
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from xsd_editor.errors import FormatError


class NodeKind(str, Enum):
    SCHEMA = "schema"
    ELEMENT = "element"
    COMPLEX_TYPE = "complexType"
    SIMPLE_TYPE = "simpleType"
    GROUP = "group"
    ATTRIBUTE_GROUP = "attributeGroup"
    ATTRIBUTE = "attribute"
    ANONYMOUS_COMPLEX_TYPE = "anonymousComplexType"
    ANONYMOUS_SIMPLE_TYPE = "anonymousSimpleType"
    IMPORT = "import"
    INCLUDE = "include"
    ANNOTATION = "annotation"
    DOCUMENTATION = "documentation"


ROOT_ADDRESS = "/" + NodeKind.SCHEMA.value
# Hosts also name the root by its bare kind token.
ROOT_ALIAS = NodeKind.SCHEMA.value

_POSITION_RE = re.compile(r"([^\[]+)\[([0-9]+)\]")
_QUALIFIED_NAME_RE = re.compile(r"\{([^}]+)\}(.+)", re.DOTALL)


class IdGenerationParams(BaseModel):
    kind: NodeKind
    name: Optional[str] = None
    parent_id: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    namespace: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ParsedAddress(BaseModel):
    # Unknown kind tokens are kept verbatim rather than rejected.
    kind: Union[NodeKind, str]
    name: Optional[str] = None
    parent_id: Optional[str] = None
    position: Optional[int] = None
    namespace: Optional[str] = None
    path: List[str] = Field(default_factory=list)


def generate_address(params: IdGenerationParams) -> str:
    """
    Builds the address for a node from its structural description.
    No legality checks happen here; see xsd_editor.validation.
    """
    kind = params.kind.value

    if params.name:
        qualified = f"{{{params.namespace}}}{params.name}" if params.namespace else params.name
        segment = f"{kind}:{qualified}"
        if params.position is not None:
            segment = f"{segment}[{params.position}]"
    elif params.position is not None:
        segment = f"{kind}[{params.position}]"
    else:
        segment = kind

    if params.parent_id:
        parent = params.parent_id if params.parent_id.startswith("/") else f"/{params.parent_id}"
        return f"{parent}/{segment}"
    return f"/{segment}"


def parse_address(address: str) -> ParsedAddress:
    if not address.startswith("/"):
        raise FormatError(f"Invalid schema ID format: must start with /: {address}")

    segments = _split_path(address[1:])
    if not segments:
        raise FormatError(f"Invalid schema ID format: no segments: {address}")

    kind, name, namespace, position = _parse_segment(segments[-1])
    parent_id = "/" + "/".join(segments[:-1]) if len(segments) > 1 else None

    return ParsedAddress(
        kind=_coerce_kind(kind),
        name=name,
        parent_id=parent_id,
        position=position,
        namespace=namespace,
        path=segments,
    )


def is_top_level(address: str) -> bool:
    return len(parse_address(address).path) == 1


def parent_address(address: str) -> Optional[str]:
    return parse_address(address).parent_id


def node_kind(address: str) -> Union[NodeKind, str]:
    return parse_address(address).kind


def node_name(address: str) -> Optional[str]:
    return parse_address(address).name


def is_root_address(address: str) -> bool:
    """True for the document root, i.e. '/schema' or the bare alias 'schema'."""
    if address == ROOT_ALIAS:
        return True
    try:
        parsed = parse_address(address)
    except FormatError:
        return False
    return len(parsed.path) == 1 and parsed.kind == NodeKind.SCHEMA and parsed.name is None


# --- helpers ---

def _split_path(path: str) -> List[str]:
    segments: List[str] = []
    current = []
    in_braces = False

    for char in path:
        if char == "{":
            in_braces = True
            current.append(char)
        elif char == "}":
            in_braces = False
            current.append(char)
        elif char == "/" and not in_braces:
            if current:
                segments.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        segments.append("".join(current))
    return segments


def _parse_segment(segment: str) -> Tuple[str, Optional[str], Optional[str], Optional[int]]:
    position = None
    body = segment
    match = _POSITION_RE.fullmatch(segment)
    if match:
        body, position = match.group(1), int(match.group(2))

    colon = _find_kind_separator(body)
    if colon <= 0:
        return body, None, None, position

    name, namespace = _parse_qualified_name(body[colon + 1:])
    return body[:colon], name, namespace, position


def _find_kind_separator(segment: str) -> int:
    in_braces = False
    for i, char in enumerate(segment):
        if char == "{":
            in_braces = True
        elif char == "}":
            in_braces = False
        elif char == ":" and not in_braces:
            return i
    return -1


def _parse_qualified_name(qualified: str) -> Tuple[str, Optional[str]]:
    match = _QUALIFIED_NAME_RE.fullmatch(qualified)
    if match:
        return match.group(2), match.group(1)
    return qualified, None


def _coerce_kind(token: str) -> Union[NodeKind, str]:
    try:
        return NodeKind(token)
    except ValueError:
        return token
