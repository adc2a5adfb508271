"""
Core generation components.

Provides the data model, classification, synthesis and merge steps used by
every language dialect.
"""

from .exceptions import GeneratorError, AmbiguousTypeError, MutationConflictError
from .descriptors import (
    FieldDescriptor,
    MemberKind,
    MemberSpec,
    Parameter,
    ConstructorAccumulator,
)
from .target import ClassTarget, InMemoryClass, TypeScope, ResolvedType
from .classifier import Classification, classify_fields
from .naming import capitalize, accessor_name, mutator_name, lookup_name
from .synthesizer import MemberSynthesizer, NULL_SENTINEL_NAME
from .merger import RegenerationMerger
from .generator import EnumMemberGenerator, GenerationResult, generate_members
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .dialect import LanguageDialect
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "AmbiguousTypeError",
    "MutationConflictError",
    # Data model
    "FieldDescriptor",
    "MemberKind",
    "MemberSpec",
    "Parameter",
    "ConstructorAccumulator",
    # Host capability
    "ClassTarget",
    "InMemoryClass",
    "TypeScope",
    "ResolvedType",
    # Generation steps
    "Classification",
    "classify_fields",
    "capitalize",
    "accessor_name",
    "mutator_name",
    "lookup_name",
    "MemberSynthesizer",
    "NULL_SENTINEL_NAME",
    "RegenerationMerger",
    "EnumMemberGenerator",
    "GenerationResult",
    "generate_members",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Rendering
    "LanguageDialect",
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
