"""
Base generator interface for all component kinds.

Defines the contract every component generator implements, plus the
helpers they share for resolving files and rendering code bodies.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Any, Optional

from ..logging_config import get_logger
from .config import ScaffoldConfig
from .paths import (
    FileResolution,
    FileResolutionRequest,
    TemplateVariables,
    resolve_file_info,
)
from .schema import AdapterType, ComponentDescriptor, GeneratedArtifact, GenerationOptions
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for invalid generation requests."""

    pass


class ComponentGenerator(ABC):
    """Abstract base class for all component generators."""

    def __init__(self, config: Optional[ScaffoldConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or ScaffoldConfig()
        self._template_engine = None

    @property
    @abstractmethod
    def descriptor(self) -> ComponentDescriptor:
        """Return the roles this component produces."""
        pass

    @property
    def component_type(self) -> str:
        return self.descriptor.component_type.value

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing code-body templates.

        Returns:
            Path to template directory or None for in-memory templates only
        """
        template_dir = Path(__file__).resolve().parent.parent / "components" / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_template_directory())
        return self._template_engine

    @abstractmethod
    def generate(self, options: GenerationOptions) -> List[GeneratedArtifact]:
        """
        Build the artifacts for one component.

        Args:
            options: Names, toggles and overrides for this run

        Returns:
            Artifacts in the order they should be written
        """
        pass

    def validate_options(self, options: GenerationOptions) -> List[str]:
        """
        Check options before generating.

        Raises:
            GeneratorError: For requests that cannot be generated

        Returns:
            Non-fatal warnings
        """
        if not options.name or not options.name.strip():
            raise GeneratorError("Option (name) is required.")

        if options.adapter_type not in AdapterType.values():
            raise GeneratorError(
                f"Unknown adapter type '{options.adapter_type}'. "
                f"Valid types: {', '.join(AdapterType.values())}"
            )

        return []

    # Shared helpers

    def resolve(
        self,
        file_role: str,
        variables: TemplateVariables,
        options: GenerationOptions,
        component_type: Optional[str] = None,
    ) -> FileResolution:
        """Resolve one file role, honouring a custom path for it."""
        request = FileResolutionRequest(
            component_type=component_type or self.component_type,
            file_role=file_role,
            variables=variables,
            output_path=options.output_path,
            custom_path=options.custom_paths.get(file_role),
        )
        return resolve_file_info(request, self.config)

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a code-body template."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        artifacts: List[GeneratedArtifact],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Generated files
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(artifacts=[])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_component(
    generator: ComponentGenerator, options: GenerationOptions
) -> GenerationResult:
    """
    Generate a component with error handling.

    Args:
        generator: Component generator instance
        options: Generation options

    Returns:
        GenerationResult with artifacts, warnings, and metadata
    """
    try:
        warnings = generator.validate_options(options)
        artifacts = generator.generate(options)

        metadata = {
            "component": generator.component_type,
            "name": options.name,
            "artifact_count": len(artifacts),
            "file_name_case": generator.config.file_name_case.value,
            "base_path": generator.config.base_path,
        }

        return GenerationResult(artifacts, warnings, metadata)

    except GeneratorError as e:
        logger.error("%s", e)
        return GenerationResult.error(str(e), exception=e)
    except Exception as e:
        logger.error("Generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Generation failed: {e}", exception=e)
