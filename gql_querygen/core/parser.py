"""GraphQL schema parser using graphql-core.

Parses .graphql/.graphqls/.gql files and produces an IRSchema.
"""

import logging
import os

from graphql import (
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    StringValueNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    parse,
    print_ast,
)

from .ir import (
    IRArgument,
    IREnum,
    IRField,
    IRInterface,
    IRScalar,
    IRSchema,
    IRType,
    IRUnion,
)

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str | None = None):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = IRSchema()
        self.current_file = ""

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        if self.schema_path is None:
            raise ValueError("No schema path given; use parse_source() instead")

        for file_path in self._collect_schema_files():
            self.current_file = os.path.basename(file_path)
            with open(file_path, encoding="utf-8") as f:
                self._parse_content(f.read())
        return self.ir

    def parse_source(self, content: str) -> IRSchema:
        """Parse SDL text and return the IR."""
        self.current_file = "<string>"
        self._parse_content(content)
        return self.ir

    def _parse_content(self, content: str):
        try:
            ast = parse(content)
        except Exception as e:
            logger.error("Error parsing %s: %s", self.current_file, e)
            raise
        self._process_ast(ast)

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        logger.debug("Collected %d schema file(s)", len(files))
        return sorted(files)

    def _process_ast(self, ast):
        """Process GraphQL AST and populate IR."""
        for definition in ast.definitions:
            if isinstance(definition, (SchemaDefinitionNode, SchemaExtensionNode)):
                self._process_schema_definition(definition)
            elif isinstance(definition, ScalarTypeDefinitionNode):
                self._process_scalar(definition)
            elif isinstance(definition, (EnumTypeDefinitionNode, EnumTypeExtensionNode)):
                self._process_enum(definition)
            elif isinstance(
                definition, (InterfaceTypeDefinitionNode, InterfaceTypeExtensionNode)
            ):
                self._process_interface(definition)
            elif isinstance(
                definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)
            ):
                self._process_object_type(definition)
            elif isinstance(definition, (UnionTypeDefinitionNode, UnionTypeExtensionNode)):
                self._process_union(definition)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self._process_input_type(definition)

    def _process_schema_definition(self, node):
        for operation_type in node.operation_types or ():
            kind = operation_type.operation.value
            self.ir.operation_types[kind] = operation_type.type.name.value

    def _process_scalar(self, node: ScalarTypeDefinitionNode):
        name = node.name.value
        self.ir.scalars[name] = IRScalar(name=name, description=_description(node))

    def _process_enum(self, node):
        name = node.name.value
        values = [v.name.value for v in node.values or ()]
        if name in self.ir.enums:
            self.ir.enums[name].values.extend(values)
        else:
            self.ir.enums[name] = IREnum(
                name=name, values=values, description=_description(node)
            )

    def _process_interface(self, node):
        name = node.name.value
        fields = self._process_fields(node.fields or ())
        if name in self.ir.interfaces:
            _merge_fields(self.ir.interfaces[name], fields)
            if _description(node):
                self.ir.interfaces[name].description = _description(node)
        else:
            self.ir.interfaces[name] = IRInterface(
                name=name, fields=fields, description=_description(node)
            )

    def _process_object_type(self, node):
        """Process object type definitions and 'extend type' merges.

        Extensions may appear before or after the base definition; fields are
        merged into whichever of the two was seen first.
        """
        name = node.name.value
        fields = self._process_fields(node.fields or ())
        interfaces = [i.name.value for i in node.interfaces or ()]

        if name in self.ir.types:
            existing = self.ir.types[name]
            _merge_fields(existing, fields)
            for interface in interfaces:
                if interface not in existing.interfaces:
                    existing.interfaces.append(interface)
            if _description(node):
                existing.description = _description(node)
        else:
            self.ir.types[name] = IRType(
                name=name,
                fields=fields,
                interfaces=interfaces,
                description=_description(node),
            )

    def _process_union(self, node):
        name = node.name.value
        members = [t.name.value for t in node.types or ()]
        if name in self.ir.unions:
            union = self.ir.unions[name]
            union.possible_types.extend(m for m in members if m not in union.possible_types)
        else:
            self.ir.unions[name] = IRUnion(
                name=name, possible_types=members, description=_description(node)
            )

    def _process_input_type(self, node: InputObjectTypeDefinitionNode):
        name = node.name.value
        self.ir.inputs[name] = IRType(
            name=name,
            fields=self._process_fields(node.fields or ()),
            description=_description(node),
            is_input=True,
        )

    def _process_fields(self, field_nodes) -> list[IRField]:
        """Process field definitions into the IRField list."""
        fields = []
        for node in field_nodes:
            args = []
            if isinstance(node, FieldDefinitionNode):
                for arg_node in node.arguments or ():
                    args.append(
                        IRArgument(
                            name=arg_node.name.value,
                            type_signature=print_ast(arg_node.type),
                            description=_description(arg_node),
                        )
                    )
            is_deprecated, reason = _deprecation(node)
            fields.append(
                IRField(
                    name=node.name.value,
                    type_signature=print_ast(node.type),
                    arguments=args,
                    is_deprecated=is_deprecated,
                    deprecation_reason=reason,
                    description=_description(node),
                )
            )
        return fields


def _description(node) -> str | None:
    # Extension nodes carry no description
    description = getattr(node, "description", None)
    return description.value if description else None


def _deprecation(node) -> tuple[bool, str | None]:
    """Return (is_deprecated, reason) from a field's @deprecated directive."""
    for directive in node.directives or ():
        if directive.name.value != "deprecated":
            continue
        for argument in directive.arguments or ():
            if argument.name.value == "reason" and isinstance(
                argument.value, StringValueNode
            ):
                return True, argument.value.value
        return True, None
    return False, None


def _merge_fields(target: IRType | IRInterface, fields: list[IRField]):
    """Append fields not already declared on the target."""
    existing_names = {f.name for f in target.fields}
    for ir_field in fields:
        if ir_field.name not in existing_names:
            target.fields.append(ir_field)
            existing_names.add(ir_field.name)


def parse_schema(content: str) -> IRSchema:
    """Parse SDL text into an IRSchema."""
    return SchemaParser().parse_source(content)
