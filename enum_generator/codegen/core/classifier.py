"""
Field classification.

Splits a class's fields into data fields and self-typed sentinel constants.
"""

from dataclasses import dataclass, field
from typing import List

from ...logging_config import get_logger
from .descriptors import FieldDescriptor
from .target import ClassTarget

logger = get_logger(__name__)

DEFAULT_NULL_MARKER = "Null"


@dataclass
class Classification:
    """Result of classifying a class's fields."""

    data_fields: List[FieldDescriptor] = field(default_factory=list)
    sentinel_fields: List[FieldDescriptor] = field(default_factory=list)
    has_null_sentinel: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.data_fields and not self.sentinel_fields


def classify_fields(
    target: ClassTarget, null_marker: str = DEFAULT_NULL_MARKER
) -> Classification:
    """
    Partition the target's fields in declaration order.

    A field whose declared type is the enclosing class itself is a sentinel;
    a sentinel whose name contains ``null_marker`` (case-sensitive) counts
    as the absent-value representative.

    Raises:
        AmbiguousTypeError: If the class's own type cannot be resolved
    """
    result = Classification()
    fields = target.fields()
    if not fields:
        return result

    own_type = target.resolve_own_type()

    for field_descriptor in fields:
        if own_type.matches(field_descriptor.declared_type):
            result.sentinel_fields.append(field_descriptor)
            if null_marker in field_descriptor.name:
                result.has_null_sentinel = True
        else:
            result.data_fields.append(field_descriptor)

    logger.debug(
        "Classified %s: %d data field(s), %d sentinel(s), null sentinel=%s",
        target.name,
        len(result.data_fields),
        len(result.sentinel_fields),
        result.has_null_sentinel,
    )
    return result
