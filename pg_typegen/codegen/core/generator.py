"""
Type generators.

TypeGenerator renders one table as one type declaration; SchemaGenerator
drives it over every table of a schema and assembles the file text.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import GeneratorConfig
from .fields import FieldRenderer
from .mapper import TypeMapper
from .profile import LanguageProfile
from .templates import TemplateEngine, TemplateError, capitalize_first
from ...catalog.base import CatalogError, CatalogReader
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class EmptyTableError(GeneratorError):
    """Raised when a requested table does not exist in the catalog."""

    def __init__(self, table_name: str, schema_name: str):
        self.table_name = table_name
        self.schema_name = schema_name
        super().__init__(
            f"Table '{table_name}' not found in schema '{schema_name}'"
        )


class TypeGenerator:
    """Generates the type declaration for a single table."""

    def __init__(
        self,
        catalog: CatalogReader,
        profile: LanguageProfile,
        config: Optional[GeneratorConfig] = None,
        engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize generator.

        Args:
            catalog: Catalog to read table metadata from
            profile: Target language profile
            config: Generator configuration
            engine: Template engine (defaults to the shared engine)
        """
        self.catalog = catalog
        self.profile = profile
        self.config = config or GeneratorConfig()
        self.engine = engine

        type_mapper = TypeMapper(
            profile,
            use_profile_fallback=self.config.use_profile_fallback,
            engine=engine,
        )
        self.renderer = FieldRenderer(
            profile,
            type_mapper=type_mapper,
            add_comments=self.config.add_comments,
            engine=engine,
        )

    @staticmethod
    def class_name(table_name: str) -> str:
        """Type name for a table: first character upper-cased only."""
        return capitalize_first(table_name)

    def generate(self, table_name: str, schema_name: Optional[str] = None) -> str:
        """
        Generate the type declaration for a table.

        Args:
            table_name: Table to render
            schema_name: Schema of the table (defaults to the configured one)

        Returns:
            Rendered type declaration

        Raises:
            EmptyTableError: If the table has no columns and does not exist
        """
        schema_name = schema_name or self.config.schema_name
        columns = self.catalog.list_columns(schema_name, table_name)

        # A table may legitimately have zero columns
        if not columns and not self.catalog.table_exists(schema_name, table_name):
            raise EmptyTableError(table_name, schema_name)

        blocks = []
        for column in columns:
            edges = self.catalog.list_foreign_keys(
                schema_name, table_name, column.column_name
            )
            column = replace(column, foreign_keys=tuple(edges))
            logger.debug(
                "Column %s.%s: %s (%d foreign key(s))",
                table_name,
                column.column_name,
                column.declared_type,
                len(edges),
            )
            blocks.append(self.renderer.render(column))

        logger.info(
            "Generated %s type for %s.%s (%d field(s))",
            self.profile.name,
            schema_name,
            table_name,
            len(blocks),
        )

        return self.profile.body.render(
            class_name=self.class_name(table_name),
            fields="\n\n".join(blocks),
            indent=self.config.indent,
            engine=self.engine,
        )


class SchemaGenerator:
    """Generates the type declarations for every table of a schema."""

    def __init__(
        self,
        catalog: CatalogReader,
        profile: LanguageProfile,
        config: Optional[GeneratorConfig] = None,
        engine: Optional[TemplateEngine] = None,
    ):
        """Initialize generator with the same collaborators as TypeGenerator."""
        self.catalog = catalog
        self.profile = profile
        self.config = config or GeneratorConfig()
        self.type_generator = TypeGenerator(catalog, profile, self.config, engine)

    def generate_types(
        self,
        schema_name: Optional[str] = None,
        tables: Optional[Sequence[str]] = None,
    ) -> Tuple[List[str], List[str]]:
        """
        Generate every type of a schema, skipping missing tables.

        Args:
            schema_name: Schema to enumerate (defaults to the configured one)
            tables: Explicit table names; defaults to all tables in the schema

        Returns:
            Tuple of (generated types in enumeration order, skipped tables)
        """
        schema_name = schema_name or self.config.schema_name
        if tables is None:
            tables = self.catalog.list_tables(schema_name)

        generated = []
        skipped = []
        for table_name in tables:
            try:
                generated.append(self.type_generator.generate(table_name, schema_name))
            except EmptyTableError as e:
                logger.warning("Skipping table: %s", e)
                skipped.append(table_name)

        return generated, skipped

    def assemble(self, types: Sequence[str]) -> str:
        """Join generated types and prepend the profile preamble."""
        body = "\n\n".join(types)
        if self.profile.needs_preamble:
            return f"{self.profile.preamble}\n{body}"
        return body

    def generate(self, schema_name: Optional[str] = None) -> str:
        """
        Generate the types of all tables in a schema.

        Args:
            schema_name: Schema to enumerate (defaults to the configured one)

        Returns:
            All generated types separated by blank lines
        """
        types, _ = self.generate_types(schema_name)
        return self.assemble(types)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: SchemaGenerator,
    schema_name: Optional[str] = None,
    tables: Optional[Sequence[str]] = None,
) -> GenerationResult:
    """
    Generate a complete source file with error handling.

    Explicitly requested tables must exist; tables enumerated from the
    schema are skipped with a warning when they disappear mid-run.

    Args:
        generator: Schema generator for the target language
        schema_name: Schema to generate (defaults to the configured one)
        tables: Optional explicit table selection

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    schema_name = schema_name or generator.config.schema_name

    try:
        if tables:
            types = [
                generator.type_generator.generate(table, schema_name)
                for table in tables
            ]
            skipped: List[str] = []
        else:
            types, skipped = generator.generate_types(schema_name)

        code = generator.assemble(types)

    except (GeneratorError, TemplateError, CatalogError) as e:
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    warnings = [
        f"Skipped table '{table}': not found in schema '{schema_name}'"
        for table in skipped
    ]
    if not types:
        warnings.append(f"No tables generated for schema '{schema_name}'")

    metadata = {
        "language": generator.profile.name,
        "file_extension": generator.profile.file_extension,
        "schema": schema_name,
        "type_count": len(types),
        "skipped_tables": len(skipped),
        "comments": generator.config.add_comments,
    }

    return GenerationResult(code, warnings, metadata)
