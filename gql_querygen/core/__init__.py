"""Core modules for GraphQL operation document generation."""

from .binder import args_to_variable_refs, bind_arguments, variables_to_type_decls
from .config import GenerationConfig
from .documents import DocumentGenerator, GenerationResult, OperationDocument
from .errors import QueryGenError, SchemaLookupError, UnknownFieldError, UnknownTypeError
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
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
from .parser import SchemaParser, parse_schema
from .selection import SelectionGenerator, SelectionResult
from .writer import DocumentWriter

__all__ = [
    # Errors
    "QueryGenError",
    "SchemaLookupError",
    "UnknownFieldError",
    "UnknownTypeError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    # IR types
    "IRArgument",
    "IREnum",
    "IRField",
    "IRInterface",
    "IRScalar",
    "IRSchema",
    "IRType",
    "IRUnion",
    # Parser
    "SchemaParser",
    "parse_schema",
    # Generation
    "GenerationConfig",
    "bind_arguments",
    "args_to_variable_refs",
    "variables_to_type_decls",
    "SelectionGenerator",
    "SelectionResult",
    "DocumentGenerator",
    "GenerationResult",
    "OperationDocument",
    # Output
    "DocumentWriter",
]
