"""Enum member generator: regenerates boilerplate members of enum-like classes."""

from .codegen import (
    AmbiguousTypeError,
    EnumMemberGenerator,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    InMemoryClass,
    generate_from_descriptor,
    generate_members,
    quick_generate,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousTypeError",
    "EnumMemberGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "InMemoryClass",
    "generate_from_descriptor",
    "generate_members",
    "quick_generate",
    "__version__",
]
