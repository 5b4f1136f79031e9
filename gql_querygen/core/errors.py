"""Exceptions raised while building operation documents."""


class QueryGenError(Exception):
    """Base class for gql-querygen errors."""


class SchemaLookupError(QueryGenError, KeyError):
    """A name could not be resolved in the schema."""

    def __init__(self, message: str, name: str):
        self.message = message
        self.name = name
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.message


class UnknownTypeError(SchemaLookupError):
    """Raised when a declared type is not defined in the schema."""

    def __init__(self, type_name: str):
        super().__init__(f"Unknown type '{type_name}' in schema", type_name)


class UnknownFieldError(SchemaLookupError):
    """Raised when a field is not declared on its parent type."""

    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        super().__init__(
            f"Type '{type_name}' has no field '{field_name}'", field_name
        )
