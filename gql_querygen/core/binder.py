"""Binding of field arguments to operation variables.

Argument names are scoped to a field, but an operation document declares
its variables in one flat list. The same base name (e.g. ``id``) showing up
on several fields becomes ``id``, ``id1``, ``id2``, ... in the order the
fields are bound.
"""

from .ir import IRArgument, IRField

BindingTable = dict[str, IRArgument]


def bind_arguments(
    field: IRField,
    duplicate_counts: dict[str, int],
    all_arguments: BindingTable,
) -> BindingTable:
    """Assign a variable name to each argument of a field.

    Args:
        field: The field whose arguments are bound
        duplicate_counts: Highest suffix handed out so far per base name;
            updated in place
        all_arguments: Every variable already declared in the operation

    Returns:
        A table mapping variable name to argument, in declaration order.
        The caller merges it into all_arguments.
    """
    table: BindingTable = {}

    def taken(var_name: str) -> bool:
        return var_name in all_arguments or var_name in table

    for arg in field.arguments:
        if arg.name in duplicate_counts:
            index = duplicate_counts[arg.name] + 1
        elif taken(arg.name):
            index = 1
        else:
            table[arg.name] = arg
            continue

        # A schema argument may literally be named like a generated one
        while taken(f"{arg.name}{index}"):
            index += 1
        duplicate_counts[arg.name] = index
        table[f"{arg.name}{index}"] = arg
    return table


def args_to_variable_refs(table: BindingTable) -> str:
    """Render call-site arguments: 'id: $id, lang: $lang1'."""
    return ", ".join(f"{arg.name}: ${var_name}" for var_name, arg in table.items())


def variables_to_type_decls(table: BindingTable) -> str:
    """Render signature declarations: '$id: Int!, $lang1: String'."""
    return ", ".join(
        f"${var_name}: {arg.type_signature}" for var_name, arg in table.items()
    )
