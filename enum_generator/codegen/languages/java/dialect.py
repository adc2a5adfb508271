"""
Java dialect implementation.

Renders generated members and whole enum declarations from the templates
shipped next to this module.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ...core.config import GeneratorConfig
from ...core.descriptors import MemberKind, MemberSpec
from ...core.dialect import LanguageDialect
from ...core.target import InMemoryClass
from ...core.templates import TemplateError
from .naming import get_java_reserved_words, validate_java_identifier

GENERATED_MARKER = "// generated"


class JavaDialect(LanguageDialect):
    """Dialect producing Java enum members."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java dialect with configuration."""
        super().__init__(config)
        self._reserved = get_java_reserved_words()

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    @property
    def reserved_words(self) -> Set[str]:
        return self._reserved

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def render_member(self, member: MemberSpec) -> str:
        """Render a synthesized member with its template."""
        if not member.template:
            raise TemplateError(f"Member {member.name} has no template")

        text = self.render_template(
            f"{member.template}.java.j2", member.context
        ).rstrip()

        if self.config.add_comments and member.kind != MemberKind.CONSTANT:
            text = f"{GENERATED_MARKER}\n{text}"
        return text

    def _member_text(self, target: InMemoryClass, member: MemberSpec) -> str:
        """Text of a member, with a signature stub for members read without a body."""
        if member.text:
            return member.text
        context = {
            "is_constructor": member.is_constructor,
            "class_name": target.name,
            "name": member.name,
            "return_type": member.return_type,
            "parameter_text": ", ".join(p.render() for p in member.parameters),
        }
        return self.render_template("member_stub.java.j2", context).rstrip()

    def render_class(self, target: InMemoryClass) -> str:
        """Render the whole enum declaration."""
        own_type = target.resolve_own_type()
        constant_members = {
            m.name: m for m in target.members() if m.kind == MemberKind.CONSTANT
        }

        constants: List[str] = []
        data_fields = []
        for field in target.fields():
            if own_type.matches(field.declared_type):
                constant = constant_members.get(field.name)
                constants.append(constant.text if constant and constant.text else field.name)
            else:
                data_fields.append(field)

        members = [
            {"text": self._member_text(target, m)}
            for m in target.members()
            if m.kind != MemberKind.CONSTANT
        ]

        context: Dict[str, Any] = {
            "package": target.package,
            "class_name": target.name,
            "constants": constants,
            "data_fields": data_fields,
            "members": members,
        }
        return self.format_code(self.render_template("enum.java.j2", context))

    def validate_members(self, members: List[MemberSpec]) -> List[str]:
        """Validate generated members for Java identifier rules."""
        warnings = super().validate_members(members)
        seen = set()
        for member in members:
            if member.kind == MemberKind.CONSTANT or member.name in seen:
                continue
            seen.add(member.name)
            for error in validate_java_identifier(member.name):
                warnings.append(f"Member {member.name}: {error}")
        return warnings
