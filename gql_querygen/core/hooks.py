"""Hooks around document generation.

A pre-generation hook gets the parsed schema and returns the schema to
generate from (e.g. with some root operations removed). A post-generation
hook gets every file about to be written, documents and index modules alike,
and returns its final content.

Example usage:
    hooks = HookRunner()
    hooks.add_pre_hook(FilterOperationsHook(exclude=["_*", "*Internal"]))
    hooks.add_post_hook(AddHeaderHook("Generated by gql-querygen"))

    result = DocumentGenerator(schema, hooks=hooks).generate()
    DocumentWriter("./gql", hooks=hooks).write(result)
"""

from dataclasses import replace
from fnmatch import fnmatchcase
from typing import Iterable, Protocol, runtime_checkable

from .ir import OPERATION_KINDS, IRSchema


@runtime_checkable
class PreGenerateHook(Protocol):
    """Anything with ``pre_generate(ir) -> ir``."""

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Anything with ``post_generate(filename, content) -> content``.

    filename is relative to the output directory, e.g. "queries/user.gql".
    """

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Prepends a comment line to every generated file.

    '#' starts a comment in GraphQL documents and Python modules alike, and
    is added when missing.
    """

    def __init__(self, header: str):
        header = header.rstrip("\n")
        self.header = header if header.startswith("#") else f"# {header}"

    def post_generate(self, _filename: str, content: str) -> str:
        return f"{self.header}\n\n{content}"


class FilterOperationsHook:
    """Keeps only the root operations whose names match glob patterns.

    An operation is kept if it matches any include pattern (or none are
    given) and no exclude pattern. Matching is case-sensitive.

    Example:
        # Every user operation except the internal ones
        hook = FilterOperationsHook(include=["user*"], exclude=["*Internal"])
    """

    def __init__(self, include: Iterable[str] = (), exclude: Iterable[str] = ()):
        self.include = tuple(include)
        self.exclude = tuple(exclude)

    def matches(self, name: str) -> bool:
        if self.include and not any(fnmatchcase(name, p) for p in self.include):
            return False
        return not any(fnmatchcase(name, p) for p in self.exclude)

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        """Replace each root type by a filtered copy.

        Other references to a root type keep all of its fields.
        """
        for kind in OPERATION_KINDS:
            root = ir.root_type(kind)
            if root is not None:
                ir.types[root.name] = replace(
                    root, fields=[f for f in root.fields if self.matches(f.name)]
                )
        return ir


class HookRunner:
    """Runs registered hooks in the order they were added."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, ir: IRSchema) -> IRSchema:
        for hook in self.pre_hooks:
            ir = hook.pre_generate(ir)
        return ir

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
