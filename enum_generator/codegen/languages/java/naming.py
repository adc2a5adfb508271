"""
Java-specific naming utilities.

Handles Java reserved words and literal names that cannot be identifiers.
"""

# Java reserved words
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
}

# Literals that are not keywords but still cannot name a variable
JAVA_LITERALS = {"true", "false", "null"}


def get_java_reserved_words() -> set[str]:
    return JAVA_RESERVED_WORDS | JAVA_LITERALS


def validate_java_identifier(name: str) -> list[str]:
    """
    Validate a Java identifier.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Identifier cannot be empty")
        return errors

    if not (name[0].isalpha() or name[0] in "_$"):
        errors.append(f"'{name}' must start with a letter, '_' or '$'")

    if not all(ch.isalnum() or ch in "_$" for ch in name):
        errors.append(f"'{name}' contains characters not allowed in Java identifiers")

    if name in get_java_reserved_words():
        errors.append(f"'{name}' is a Java reserved word")

    return errors
