"""Exceptions raised by the generation engine."""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class AmbiguousTypeError(GeneratorError):
    """The enclosing class's type cannot be resolved uniquely in its scope."""

    def __init__(self, type_name: str, candidates):
        self.type_name = type_name
        self.candidates = sorted(candidates)
        super().__init__(
            f"Type '{type_name}' is ambiguous in scope: {', '.join(self.candidates)}"
        )


class MutationConflictError(GeneratorError):
    """The target class changed between a query and the following mutation."""

    pass
