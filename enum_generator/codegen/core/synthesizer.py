"""
Member synthesis.

The ``*_spec`` functions derive a member's name, parameters and template
context from a single field (or the accumulated constructor data) and never
touch the class. ``MemberSynthesizer`` pairs them with a dialect so the
returned members also carry rendered source text.
"""

from typing import Optional

from .descriptors import (
    ConstructorAccumulator,
    FieldDescriptor,
    MemberKind,
    MemberSpec,
    Parameter,
)
from .dialect import LanguageDialect
from .naming import accessor_name, lookup_name, mutator_name

# Lookup methods fall back to this constant whatever sentinel was detected.
NULL_SENTINEL_NAME = "Null"


def accessor_spec(field: FieldDescriptor) -> MemberSpec:
    name = accessor_name(field.name, field.declared_type)
    return MemberSpec(
        kind=MemberKind.ACCESSOR,
        name=name,
        return_type=field.declared_type,
        template="accessor",
        context={
            "name": name,
            "return_type": field.declared_type,
            "field_name": field.name,
        },
    )


def mutator_spec(field: FieldDescriptor) -> MemberSpec:
    name = mutator_name(field.name, field.declared_type)
    return MemberSpec(
        kind=MemberKind.MUTATOR,
        name=name,
        parameters=(Parameter(field.name, field.declared_type),),
        return_type="void",
        template="mutator",
        context={
            "name": name,
            "field_name": field.name,
            "field_type": field.declared_type,
        },
    )


def lookup_spec(field: FieldDescriptor, class_name: str) -> MemberSpec:
    """
    Static lookup returning the first instance whose field equals the argument.

    Comparison is null-safe value equality. When nothing matches the method
    returns ``NULL_SENTINEL_NAME``.
    """
    name = lookup_name(field.name)
    return MemberSpec(
        kind=MemberKind.LOOKUP,
        name=name,
        parameters=(Parameter(field.name, field.declared_type),),
        return_type=class_name,
        template="lookup",
        context={
            "name": name,
            "class_name": class_name,
            "field_name": field.name,
            "field_type": field.declared_type,
            "fallback": NULL_SENTINEL_NAME,
        },
    )


def constructor_spec(
    class_name: str, accumulator: ConstructorAccumulator
) -> MemberSpec:
    return MemberSpec(
        kind=MemberKind.CONSTRUCTOR,
        name=class_name,
        parameters=accumulator.parameters,
        template="constructor",
        context={
            "class_name": class_name,
            "parameter_text": accumulator.parameter_text,
            "assignments": accumulator.assignments,
        },
    )


def sentinel_spec(class_name: str) -> MemberSpec:
    return MemberSpec(
        kind=MemberKind.CONSTANT,
        name=NULL_SENTINEL_NAME,
        return_type=class_name,
        template="constant",
        context={"name": NULL_SENTINEL_NAME},
    )


class MemberSynthesizer:
    """Builds rendered members for one class."""

    def __init__(self, dialect: LanguageDialect, class_name: str):
        self.dialect = dialect
        self.class_name = class_name

    def _rendered(self, member: MemberSpec) -> MemberSpec:
        member.text = self.dialect.render_member(member)
        return member

    def accessor(self, field: FieldDescriptor) -> MemberSpec:
        return self._rendered(accessor_spec(field))

    def mutator(self, field: FieldDescriptor) -> MemberSpec:
        return self._rendered(mutator_spec(field))

    def lookup(self, field: FieldDescriptor) -> MemberSpec:
        return self._rendered(lookup_spec(field, self.class_name))

    def constructor(
        self, accumulator: ConstructorAccumulator
    ) -> Optional[MemberSpec]:
        """All-fields constructor, or None when no data field was accumulated."""
        if not len(accumulator):
            return None
        return self._rendered(constructor_spec(self.class_name, accumulator))

    def sentinel(self) -> MemberSpec:
        return self._rendered(sentinel_spec(self.class_name))
