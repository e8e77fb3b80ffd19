"""
Pipeline generator.

Runs the phases in order for one target language:

1. Resolve each source declaration into an IR declaration
2. Validate and order the IR declarations
3. Render the ordered IR with the target backend
"""

from __future__ import annotations

import logging

from .analyzer.declaration_resolver import DeclarationResolver
from .analyzer.declaration_set import DeclarationSetBuilder
from .analyzer.ir_nodes import IRDeclaration
from .backends import CodeBackend, KotlinBackend, SwiftBackend
from .config import CodeGeneratorConfig
from .declarations.nodes import DeclarationNode

logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[CodeBackend]] = {
    "swift": SwiftBackend,
    "kotlin": KotlinBackend,
}

SUPPORTED_LANGUAGES = list(BACKENDS)


def build_intermediate_representation(declarations: list[DeclarationNode]) -> list[IRDeclaration]:
    """Resolve, validate and order source declarations."""
    resolver = DeclarationResolver()
    resolved = [resolver.resolve(declaration) for declaration in declarations]
    logger.debug(f"Resolved {len(resolved)} declarations")
    return DeclarationSetBuilder().build(resolved)


class PipelineGenerator:
    """Generates target code from source declarations."""

    def __init__(
        self,
        declarations: list[DeclarationNode],
        config: CodeGeneratorConfig | None = None,
        language: str = "swift",
    ):
        """
        Initialize the generator.

        Args:
            declarations: Source declarations, in source order
            config: Code generation configuration
            language: Target language ("swift" or "kotlin")
        """
        if language not in BACKENDS:
            raise ValueError(f"Language '{language}' is not supported")
        self.declarations = declarations
        self.config = config or CodeGeneratorConfig()
        self.language = language
        # Configuration problems surface before any resolution work
        self.backend = BACKENDS[language](self.config)

    def generate(self) -> str:
        """Generate the target source text."""
        ordered = build_intermediate_representation(self.declarations)
        return self.backend.generate(ordered)


def generate_swift_code(declarations: list[DeclarationNode], config: CodeGeneratorConfig | None = None) -> str:
    """Render Swift records and enums for the given declarations."""
    return PipelineGenerator(declarations, config, "swift").generate()


def generate_kotlin_code(declarations: list[DeclarationNode], config: CodeGeneratorConfig) -> str:
    """Render Kotlin records and enums; `config.kotlin_package_name` is required."""
    return PipelineGenerator(declarations, config, "kotlin").generate()
