"""Intermediate Representation (IR) for GraphQL schemas.

This module defines the read-only type graph that operation documents are
generated from. Every output field resolves, after stripping list and
non-null wrappers, to exactly one node: a leaf (scalar or enum), an object
(object, interface or input type) or a union.
"""

import re
from dataclasses import dataclass, field

from .errors import UnknownFieldError, UnknownTypeError

BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")

OPERATION_KINDS = ("query", "mutation", "subscription")

_WRAPPERS = re.compile(r"[\[\]!]")


@dataclass
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type_signature: str  # verbatim, e.g. "[ID!]!"
    type_name: str = ""
    description: str | None = None

    def __post_init__(self):
        if not self.type_name:
            self.type_name = IRSchema.strip_wrappers(self.type_signature)


@dataclass
class IRField:
    """Represents a field in a GraphQL type or interface."""
    name: str
    type_signature: str
    type_name: str = ""
    arguments: list[IRArgument] = field(default_factory=list)
    is_deprecated: bool = False
    deprecation_reason: str | None = None
    description: str | None = None

    def __post_init__(self):
        if not self.type_name:
            self.type_name = IRSchema.strip_wrappers(self.type_signature)


@dataclass
class IRScalar:
    """Represents a GraphQL scalar type."""
    name: str
    description: str | None = None


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[str] = field(default_factory=list)
    description: str | None = None


@dataclass
class IRType:
    """Represents a GraphQL object type or input type."""
    name: str
    fields: list[IRField]
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    is_input: bool = False


@dataclass
class IRInterface:
    """Represents a GraphQL interface type."""
    name: str
    fields: list[IRField]
    description: str | None = None


@dataclass
class IRUnion:
    """Represents a GraphQL union and the names of its member types."""
    name: str
    possible_types: list[str] = field(default_factory=list)
    description: str | None = None


TypeNode = IRScalar | IREnum | IRType | IRInterface | IRUnion


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    scalars: dict[str, IRScalar] = field(default_factory=dict)
    enums: dict[str, IREnum] = field(default_factory=dict)
    types: dict[str, IRType] = field(default_factory=dict)
    inputs: dict[str, IRType] = field(default_factory=dict)
    interfaces: dict[str, IRInterface] = field(default_factory=dict)
    unions: dict[str, IRUnion] = field(default_factory=dict)
    # Operation kind -> root type name; filled from a schema definition
    operation_types: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in BUILTIN_SCALARS:
            self.scalars.setdefault(name, IRScalar(name=name))

    def get_type_by_name(self, name: str) -> TypeNode | None:
        """Look up any named type."""
        for table in (
            self.types,
            self.interfaces,
            self.unions,
            self.inputs,
            self.enums,
            self.scalars,
        ):
            if name in table:
                return table[name]
        return None

    def resolve_type(self, name: str) -> TypeNode:
        """Look up a type by name, raising UnknownTypeError if it is missing."""
        node = self.get_type_by_name(name)
        if node is None:
            raise UnknownTypeError(name)
        return node

    @staticmethod
    def fields_of(node: TypeNode) -> list[IRField] | None:
        """Return the ordered fields of a node, or None for leaves and unions."""
        if isinstance(node, (IRType, IRInterface)):
            return node.fields
        return None

    def possible_types_of(self, union: IRUnion) -> list[TypeNode]:
        """Resolve the concrete member types of a union, in declaration order."""
        return [self.resolve_type(name) for name in union.possible_types]

    @staticmethod
    def is_deprecated(ir_field: IRField) -> bool:
        return ir_field.is_deprecated

    @staticmethod
    def strip_wrappers(type_signature: str) -> str:
        """Remove list and non-null markers: '[User!]!' -> 'User'."""
        return _WRAPPERS.sub("", type_signature).strip()

    def get_field(self, node: TypeNode, field_name: str) -> IRField:
        """Return the named field of a type, raising UnknownFieldError if absent."""
        for ir_field in self.fields_of(node) or ():
            if ir_field.name == field_name:
                return ir_field
        raise UnknownFieldError(node.name, field_name)

    def root_type(self, operation_kind: str) -> IRType | None:
        """Return the root object type for 'query', 'mutation' or 'subscription'."""
        if operation_kind not in OPERATION_KINDS:
            raise ValueError(f"Unknown operation kind: {operation_kind}")
        type_name = self.operation_types.get(
            operation_kind, operation_kind.capitalize()
        )
        return self.types.get(type_name)
