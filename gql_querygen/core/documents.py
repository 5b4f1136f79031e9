"""Operation documents for every root field of a schema.

One document is produced per field of the Query, Mutation and Subscription
root types:

    query user($id: Int!){
        user(id: $id){
            id
            username
        }
    }
"""

import logging
from dataclasses import dataclass, field

from .binder import BindingTable, variables_to_type_decls
from .config import GenerationConfig
from .hooks import HookRunner
from .ir import IRSchema
from .selection import SelectionGenerator

logger = logging.getLogger(__name__)

# Order in which kinds are generated
GENERATION_ORDER = ("mutation", "query", "subscription")


@dataclass
class OperationDocument:
    """A complete operation for one root field."""
    operation_kind: str  # 'query', 'mutation' or 'subscription'
    name: str
    variables: BindingTable
    selection: str

    @property
    def signature_line(self) -> str:
        """Return e.g. 'query user($id: Int!){' or 'query ping{'."""
        decls = variables_to_type_decls(self.variables)
        params = f"({decls})" if decls else ""
        return f"{self.operation_kind} {self.name}{params}{{"

    @property
    def body(self) -> str:
        return f"{self.selection}\n}}"

    @property
    def text(self) -> str:
        return f"{self.signature_line}\n{self.body}"


@dataclass
class GenerationResult:
    """Documents grouped by operation kind, plus non-fatal diagnostics."""
    documents: dict[str, list[OperationDocument]] = field(default_factory=dict)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def all_documents(self) -> list[OperationDocument]:
        return [doc for docs in self.documents.values() for doc in docs]


class DocumentGenerator:
    """Generates an operation document for every root field of a schema.

    Example:
        schema = parse_schema(sdl)
        result = DocumentGenerator(schema, GenerationConfig(depth_limit=5)).generate()
        for doc in result.documents["query"]:
            print(doc.text)
    """

    def __init__(
        self,
        schema: IRSchema,
        config: GenerationConfig | None = None,
        hooks: HookRunner | None = None,
    ):
        self.schema = schema
        self.config = config or GenerationConfig()
        self.hooks = hooks or HookRunner()

    def generate(self) -> GenerationResult:
        """Generate documents for all operation kinds.

        Kinds without a root type are skipped with a diagnostic.

        Raises:
            UnknownTypeError: If a reachable field has an undefined type
        """
        self.schema = self.hooks.run_pre_hooks(self.schema)
        result = GenerationResult()
        for kind in GENERATION_ORDER:
            documents = self.generate_kind(kind, result.diagnostics)
            if documents is None:
                message = f"No {kind} type found in your schema"
                logger.info(message)
                result.diagnostics.append(message)
                continue
            result.documents[kind] = documents
        return result

    def generate_kind(
        self,
        operation_kind: str,
        diagnostics: list[str] | None = None,
    ) -> list[OperationDocument] | None:
        """Generate documents for one kind, or None if the schema lacks it.

        Root fields with nothing to select (e.g. an object type whose fields
        are all deprecated) are skipped and reported in diagnostics.
        """
        root = self.schema.root_type(operation_kind)
        if root is None or not root.fields:
            return None

        selections = SelectionGenerator(self.schema, self.config)
        documents = []
        for root_field in root.fields:
            if root_field.is_deprecated and not self.config.include_deprecated_fields:
                logger.debug("Skipping deprecated %s %s", operation_kind, root_field.name)
                continue
            selection = selections.generate(root_field.name, root)
            if not selection.text:
                message = f"Skipping {operation_kind} {root_field.name}: nothing to select"
                logger.info(message)
                if diagnostics is not None:
                    diagnostics.append(message)
                continue
            documents.append(
                OperationDocument(
                    operation_kind=operation_kind,
                    name=root_field.name,
                    variables=selection.arguments,
                    selection=selection.text,
                )
            )
        logger.debug("Generated %d %s document(s)", len(documents), operation_kind)
        return documents
