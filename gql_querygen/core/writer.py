"""Writes generated operation documents to disk.

Layout of the output directory:

    <output>/__init__.py            imports every kind package
    <output>/queries/__init__.py    one constant per document
    <output>/queries/user.gql
    <output>/mutations/...
    <output>/subscriptions/...

Index modules are rendered from Jinja2 templates. Supports custom templates
via the template_dir parameter:
    writer = DocumentWriter(output_dir, template_dir="./my_templates")
"""

import ast
import keyword
import logging
import shutil
from pathlib import Path
from typing import Any

from graphql import GraphQLError, parse
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .documents import GenerationResult
from .hooks import HookRunner

logger = logging.getLogger(__name__)

FOLDER_NAMES = {
    "query": "queries",
    "mutation": "mutations",
    "subscription": "subscriptions",
}


def safe_identifier(name: str) -> str:
    """Make a field name usable as a Python identifier by suffixing keywords."""
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


class DocumentWriter:
    """Persists a GenerationResult as .gql files plus Python index modules.

    Available templates to override:
        - kind_init.py.j2: index of one operation kind
        - package_init.py.j2: root package index
    """

    def __init__(
        self,
        output_dir: str | Path,
        hooks: HookRunner | None = None,
        clean: bool = True,
        template_dir: str | None = None,
    ):
        """Initialize the writer.

        Args:
            output_dir: Directory where documents will be written
            hooks: Post-generation hooks applied to every file
            clean: Remove the output directory before writing
            template_dir: Optional directory with custom Jinja2 templates
        """
        self.output_dir = Path(output_dir)
        self.hooks = hooks or HookRunner()
        self.clean = clean

        loaders = []
        if template_dir and Path(template_dir).is_dir():
            loaders.append(FileSystemLoader(str(template_dir)))
        loaders.append(PackageLoader("gql_querygen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["safe_identifier"] = safe_identifier

    def write(self, result: GenerationResult) -> list[Path]:
        """Write every document and index file. Returns the written paths.

        All files are rendered and validated before anything on disk is
        touched, so a ValueError leaves previous output in place.
        """
        files = self.render_files(result)

        if self.clean and self.output_dir.exists():
            logger.info("Removing previous output in %s", self.output_dir)
            shutil.rmtree(self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for relative_path, content in files.items():
            full_path = self.output_dir / relative_path
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(content, encoding="utf-8")
            written.append(full_path)
        logger.info("Wrote %d file(s) to %s", len(written), self.output_dir)
        return written

    def render_files(self, result: GenerationResult) -> dict[str, str]:
        """Return relative path -> final content for every output file.

        Raises:
            ValueError: If a file is not valid GraphQL or Python after hooks
        """
        files = {}
        folders = []
        for kind, documents in result.documents.items():
            folder = FOLDER_NAMES[kind]
            folders.append(folder)
            for document in documents:
                files[f"{folder}/{document.name}.gql"] = document.text
            files[f"{folder}/__init__.py"] = self._render(
                "kind_init.py.j2", {"kind": kind, "documents": documents}
            )
        files["__init__.py"] = self._render(
            "package_init.py.j2", {"folders": sorted(folders)}
        )

        for relative_path, content in files.items():
            content = self.hooks.run_post_hooks(relative_path, content)
            self._validate(relative_path, content)
            files[relative_path] = content
        return files

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        return self.env.get_template(template_name).render(context)

    @staticmethod
    def _validate(relative_path: str, content: str):
        if relative_path.endswith(".gql"):
            try:
                parse(content)
            except GraphQLError as e:
                raise ValueError(f"Generated invalid GraphQL for {relative_path}: {e}")
        elif relative_path.endswith(".py"):
            try:
                ast.parse(content)
            except SyntaxError as e:
                raise ValueError(f"Generated invalid Python for {relative_path}: {e}")
