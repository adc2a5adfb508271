"""
Enum member generation.

Regenerates accessors, mutators, lookup methods and the all-fields
constructor for enum-like classes.
"""

from typing import Any, Dict, Optional, Union

from .core import (
    AmbiguousTypeError,
    ClassTarget,
    EnumMemberGenerator,
    FieldDescriptor,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    InMemoryClass,
    MutationConflictError,
    TypeScope,
    generate_members,
    load_config,
)
from .registry import (
    DialectRegistry,
    RegistryError,
    get_dialect,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


def generate_from_descriptor(
    descriptor: Dict[str, Any],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> tuple[InMemoryClass, GenerationResult]:
    """
    Run one generation pass over a class descriptor.

    Args:
        descriptor: Class descriptor dict (see ``InMemoryClass.from_dict``)
        config: GeneratorConfig or dict of overrides

    Returns:
        The regenerated class and the generation result
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    target = InMemoryClass.from_dict(descriptor)
    return target, generate_members(target, config)


def quick_generate(descriptor: Dict[str, Any], **options) -> str:
    """
    Regenerate a class descriptor and render it as source.

    Args:
        descriptor: Class descriptor dict
        **options: Generator options

    Returns:
        Rendered source of the whole class
    """
    config = load_config(custom_config=options)
    target, result = generate_from_descriptor(descriptor, config)

    if not result.success:
        raise RuntimeError(f"Code generation failed: {result.error_message}")

    return get_dialect(config.language, config).render_class(target)


__all__ = [
    "AmbiguousTypeError",
    "ClassTarget",
    "DialectRegistry",
    "EnumMemberGenerator",
    "FieldDescriptor",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "InMemoryClass",
    "MutationConflictError",
    "RegistryError",
    "TypeScope",
    "generate_from_descriptor",
    "generate_members",
    "get_dialect",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
    "quick_generate",
]
