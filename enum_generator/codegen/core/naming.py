"""
Naming rules for generated members.

Every generated member name is a fixed prefix followed by the field name
with its first character upper-cased.
"""

ACCESSOR_PREFIX = "get"
MUTATOR_PREFIX = "set"
BOOLEAN_PREFIX = "is"
LOOKUP_PREFIX = "valueOf"

BOOLEAN_TYPE_KEYWORD = "boolean"


def capitalize(name: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def is_boolean_type(declared_type: str) -> bool:
    """Case-insensitive check for a boolean type name (``boolean``, ``Boolean``)."""
    return BOOLEAN_TYPE_KEYWORD in declared_type.lower()


def accessor_name(field_name: str, declared_type: str) -> str:
    """``getX``, or ``isX`` for boolean fields."""
    prefix = BOOLEAN_PREFIX if is_boolean_type(declared_type) else ACCESSOR_PREFIX
    return prefix + capitalize(field_name)


def mutator_name(field_name: str, declared_type: str) -> str:
    """
    ``setX``, or ``isX`` for boolean fields.

    Boolean mutators share the accessor's ``is`` prefix. Existing callers
    depend on that name, so it is kept as is.
    """
    prefix = BOOLEAN_PREFIX if is_boolean_type(declared_type) else MUTATOR_PREFIX
    return prefix + capitalize(field_name)


def lookup_name(field_name: str) -> str:
    """``valueOfX``."""
    return LOOKUP_PREFIX + capitalize(field_name)
