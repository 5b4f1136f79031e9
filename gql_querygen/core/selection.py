"""Selection set generation.

Walks the type graph from one root operation field and renders every
reachable field as a nested selection, four spaces per level:

    user(id: $id){
        id
        friends{
            username
        }
    }

Expansion of an object field stops when the path already went through the
same (parent field, field) edge or when the depth limit is exceeded. A field
whose whole subtree is cut off is left out instead of being rendered with
empty braces. Union fields get one ``... on Member { }`` fragment per member
type with something to select.
"""

import logging
from dataclasses import dataclass, field

from .binder import BindingTable, args_to_variable_refs, bind_arguments
from .config import GenerationConfig
from .ir import IRField, IRSchema, IRUnion, TypeNode

logger = logging.getLogger(__name__)

INDENT = "    "


@dataclass
class SelectionResult:
    """Rendered selection of one root field and the variables it uses."""
    text: str
    arguments: BindingTable = field(default_factory=dict)


@dataclass
class _Traversal:
    """Accumulators shared by every call below one root field."""
    arguments: BindingTable = field(default_factory=dict)
    duplicate_counts: dict[str, int] = field(default_factory=dict)


class SelectionGenerator:
    """Renders exhaustive selections for root operation fields."""

    def __init__(self, schema: IRSchema, config: GenerationConfig | None = None):
        self.schema = schema
        self.config = config or GenerationConfig()

    def generate(
        self,
        field_name: str,
        parent_type: TypeNode,
        parent_name: str | None = None,
    ) -> SelectionResult:
        """Render the selection for one field of parent_type.

        Args:
            field_name: Name of the root field, e.g. "user"
            parent_type: The type declaring the field, usually a root type
            parent_name: Name used for the first visited edge; defaults to the
                parent type's name

        Returns:
            SelectionResult with the text (empty if everything was cut off)
            and the variables bound anywhere in the selection

        Raises:
            UnknownTypeError: If any reachable field has an undefined type
        """
        root_field = self.schema.get_field(parent_type, field_name)
        traversal = _Traversal()
        text = self._render_field(
            root_field,
            parent_name or parent_type.name,
            traversal,
            visited=frozenset(),
            depth=1,
            from_union=False,
        )
        return SelectionResult(text=text, arguments=traversal.arguments)

    def _render_field(
        self,
        ir_field: IRField,
        parent_name: str,
        traversal: _Traversal,
        visited: frozenset[str],
        depth: int,
        from_union: bool,
    ) -> str:
        target = self.schema.resolve_type(ir_field.type_name)
        child_fields = self.schema.fields_of(target)
        indent = INDENT * depth
        is_union = isinstance(target, IRUnion)

        if child_fields is not None or is_union:
            edge = f"{parent_name}To{ir_field.name}Key"
            # Inside fragments, checked two levels shallower than indented
            effective_depth = depth - 2 if from_union else depth
            if edge in visited or effective_depth > self.config.depth_limit:
                return ""
            # Union members may each expand the same field name
            if not from_union:
                visited = visited | {edge}

        if child_fields is not None:
            child_text = self._render_children(
                child_fields, ir_field.name, traversal, visited, depth + 1, from_union
            )
            if not child_text:
                return ""
            call, _ = self._render_call(ir_field, traversal, depth)
            return f"{call}{{\n{child_text}\n{indent}}}"

        if not is_union:
            call, _ = self._render_call(ir_field, traversal, depth)
            return call

        # A union field binds its own arguments before its fragments
        saved_counts = dict(traversal.duplicate_counts)
        call, bindings = self._render_call(ir_field, traversal, depth)
        fragments = self._render_fragments(
            target, ir_field.name, traversal, visited, depth
        )
        if not fragments:
            logger.debug("Omitting union field %s: no member to select", ir_field.name)
            # Nothing below an empty union was bound, so only its own names go
            for var_name in bindings:
                del traversal.arguments[var_name]
            traversal.duplicate_counts.clear()
            traversal.duplicate_counts.update(saved_counts)
            return ""
        return call + "{\n" + "".join(fragments) + f"{indent}}}"

    def _render_call(
        self, ir_field: IRField, traversal: _Traversal, depth: int
    ) -> tuple[str, BindingTable]:
        """Render the indented field name and argument list, binding its variables."""
        text = f"{INDENT * depth}{ir_field.name}"
        if not ir_field.arguments or (depth > 1 and self.config.exclude_nested_args):
            return text, {}
        bindings = bind_arguments(ir_field, traversal.duplicate_counts, traversal.arguments)
        traversal.arguments.update(bindings)
        return f"{text}({args_to_variable_refs(bindings)})", bindings

    def _render_children(
        self,
        child_fields: list[IRField],
        parent_name: str,
        traversal: _Traversal,
        visited: frozenset[str],
        depth: int,
        from_union: bool,
    ) -> str:
        rendered = []
        for child in child_fields:
            if self.schema.is_deprecated(child) and not self.config.include_deprecated_fields:
                continue
            text = self._render_field(
                child, parent_name, traversal, visited, depth, from_union
            )
            if text:
                rendered.append(text)
        return "\n".join(rendered)

    def _render_fragments(
        self,
        union: IRUnion,
        parent_name: str,
        traversal: _Traversal,
        visited: frozenset[str],
        depth: int,
    ) -> list[str]:
        """Render one inline fragment per member type with a non-empty selection."""
        fragment_indent = INDENT * (depth + 1)
        fragments = []
        for member in self.schema.possible_types_of(union):
            member_fields = self.schema.fields_of(member)
            if not member_fields:
                continue
            member_text = self._render_children(
                member_fields, parent_name, traversal, visited, depth + 2, True
            )
            if member_text:
                fragments.append(
                    f"{fragment_indent}... on {member.name} {{\n"
                    f"{member_text}\n{fragment_indent}}}\n"
                )
        return fragments
