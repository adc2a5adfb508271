"""
Base dialect interface for all target languages.

A dialect knows how to turn a ``MemberSpec`` into source text and how to
render a whole class. Naming and merge rules are language-independent and
live in the core.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set
from pathlib import Path

from .config import GeneratorConfig
from .descriptors import MemberKind, MemberSpec
from .target import InMemoryClass
from .templates import TemplateEngine, create_template_engine


class LanguageDialect(ABC):
    """Abstract base class for all target language dialects."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize dialect with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this dialect."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.config.indent_unit
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    def reserved_words(self) -> Set[str]:
        """Words that cannot be used as identifiers."""
        return set()

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this dialect.

        Return None when the dialect ships no templates.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this dialect."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def render_member(self, member: MemberSpec) -> str:
        """
        Render a synthesized member to source text.

        Args:
            member: Member carrying a template name and context

        Returns:
            Source text of the member
        """
        pass

    @abstractmethod
    def render_class(self, target: InMemoryClass) -> str:
        """
        Render a complete class.

        Args:
            target: Class to render

        Returns:
            Source text for the whole class
        """
        pass

    def validate_members(self, members: List[MemberSpec]) -> List[str]:
        """
        Check synthesized members for identifiers the language rejects.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for member in members:
            if member.kind == MemberKind.CONSTANT:
                continue
            for parameter in member.parameters:
                if parameter.name in self.reserved_words:
                    warnings.append(
                        f"Parameter '{parameter.name}' of {member.name} is a "
                        f"{self.language_name} reserved word"
                    )
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return self.config.line_ending.join(formatted_lines).strip() + self.config.line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
