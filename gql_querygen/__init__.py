"""Generate exhaustive GraphQL operation documents from a schema."""

from .core import (
    DocumentGenerator,
    DocumentWriter,
    GenerationConfig,
    SchemaParser,
    parse_schema,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentGenerator",
    "DocumentWriter",
    "GenerationConfig",
    "SchemaParser",
    "parse_schema",
]
