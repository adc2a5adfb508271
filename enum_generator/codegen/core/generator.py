"""
Generation pass orchestration.

One pass: classify the fields, generate accessor, mutator and lookup for
every data field, make sure the ``Null`` constant exists, drop zero-argument
constructors and finally add the all-fields constructor. The pass mutates
the target in place and is expected to run inside a single atomic edit
provided by the host.
"""

from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .classifier import classify_fields
from .config import GeneratorConfig
from .descriptors import ConstructorAccumulator, MemberSpec
from .dialect import LanguageDialect
from .exceptions import AmbiguousTypeError, GeneratorError
from .merger import RegenerationMerger
from .synthesizer import NULL_SENTINEL_NAME, MemberSynthesizer
from .target import ClassTarget
from .templates import TemplateError

logger = get_logger(__name__)


class GenerationResult:
    """Container for the outcome of one generation pass."""

    def __init__(
        self,
        added: List[MemberSpec] = None,
        removed: List[MemberSpec] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
        skipped: bool = False,
    ):
        """
        Initialize generation result.

        Args:
            added: Members appended to the class
            removed: Members deleted from the class
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
            skipped: True when the class had nothing to generate for
        """
        self.added = added or []
        self.removed = removed or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.skipped = skipped
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def not_applicable(cls, class_name: str, reason: str) -> "GenerationResult":
        """Result for a class that takes no generated members; nothing was changed."""
        return cls(metadata={"class_name": class_name, "reason": reason}, skipped=True)

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    @property
    def added_names(self) -> List[str]:
        return [m.name for m in self.added]


class EnumMemberGenerator:
    """Runs generation passes over enum-like classes."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        dialect: Optional[LanguageDialect] = None,
    ):
        self.config = config or GeneratorConfig()
        self.dialect = dialect or self._resolve_dialect()

    def _resolve_dialect(self) -> LanguageDialect:
        from ..registry import get_dialect

        return get_dialect(self.config.language, self.config)

    def generate(self, target: ClassTarget) -> GenerationResult:
        """
        Run one generation pass over ``target``.

        Args:
            target: Class to regenerate members on

        Returns:
            GenerationResult describing the changes

        Raises:
            AmbiguousTypeError: If the class's own type is ambiguous in scope
        """
        if not target.is_enum:
            logger.info("%s is not an enum; nothing to generate", target.name)
            return GenerationResult.not_applicable(target.name, "not an enum")

        if not target.fields():
            logger.info("%s has no fields; nothing to generate", target.name)
            return GenerationResult.not_applicable(target.name, "no fields")

        classification = classify_fields(target, self.config.null_marker)
        synthesizer = MemberSynthesizer(self.dialect, target.name)
        merger = RegenerationMerger(target)
        accumulator = ConstructorAccumulator()

        for field in classification.data_fields:
            merger.merge(synthesizer.accessor(field))
            merger.merge(synthesizer.mutator(field))
            merger.merge(synthesizer.lookup(field))
            accumulator.add(field)

        sentinel_added = merger.ensure_sentinel(
            classification.has_null_sentinel, synthesizer.sentinel
        )

        merger.remove_zero_arg_constructors()

        constructor = synthesizer.constructor(accumulator)
        if constructor is not None:
            merger.merge(constructor)

        warnings = self.dialect.validate_members(merger.added)
        warnings.extend(self._sentinel_warnings(classification.sentinel_fields))

        logger.info(
            "Generated %d member(s) for %s, removed %d",
            len(merger.added),
            target.name,
            len(merger.removed),
        )

        metadata = {
            "class_name": target.name,
            "language": self.dialect.language_name,
            "data_fields": len(classification.data_fields),
            "sentinel_fields": len(classification.sentinel_fields),
            "sentinel_added": sentinel_added,
            "constructor_parameters": len(accumulator),
        }
        return GenerationResult(
            added=merger.added,
            removed=merger.removed,
            warnings=warnings,
            metadata=metadata,
        )

    def _sentinel_warnings(self, sentinel_fields) -> List[str]:
        """Warn when detection found a sentinel the lookup fallback does not name."""
        names = [f.name for f in sentinel_fields]
        warnings = []
        if NULL_SENTINEL_NAME in names:
            return warnings
        for name in names:
            if self.config.null_marker in name:
                warnings.append(
                    f"Sentinel '{name}' was detected but lookup methods return "
                    f"'{NULL_SENTINEL_NAME}'"
                )
        return warnings


def generate_members(
    target: ClassTarget, config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """
    Run a generation pass with error handling.

    Ambiguous types propagate to the caller; other generator errors are
    reported through the result.

    Args:
        target: Class to regenerate members on
        config: Generator configuration

    Returns:
        GenerationResult with changes, warnings, and metadata
    """
    try:
        return EnumMemberGenerator(config).generate(target)
    except AmbiguousTypeError:
        raise
    except (GeneratorError, TemplateError) as e:
        logger.error("Generation failed for %s: %s", target.name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
