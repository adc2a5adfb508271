"""
Regeneration merging.

Inserting a member first deletes whatever it replaces, so running a pass
again swaps previously generated members out instead of duplicating them.
Method collisions are decided by name only: overloads sharing the name are
dropped together.
"""

from typing import Callable, List, Set

from ...logging_config import get_logger
from .descriptors import MemberSpec
from .target import ClassTarget

logger = get_logger(__name__)


class RegenerationMerger:
    """Applies one pass of generated members to a class."""

    def __init__(self, target: ClassTarget):
        self.target = target
        self.added: List[MemberSpec] = []
        self.removed: List[MemberSpec] = []
        # Members appended by this pass; collisions among them are kept
        self._inserted: Set[int] = set()

    def _delete_where(self, candidates: List[MemberSpec], reason: str) -> int:
        count = 0
        for member in candidates:
            if id(member) in self._inserted:
                continue
            self.target.delete(member)
            self.removed.append(member)
            count += 1
            logger.debug("Removed %s %s (%s)", member.kind.value, member.name, reason)
        return count

    def _insert(self, member: MemberSpec) -> None:
        self.target.add(member)
        self.added.append(member)
        self._inserted.add(id(member))

    def merge(self, member: MemberSpec) -> None:
        """
        Replace colliding members with ``member``.

        Methods collide by name. Constructors collide by parameter count,
        since they all share the class name.
        """
        if member.is_constructor:
            collisions = [
                c for c in self.target.constructors() if c.arity == member.arity
            ]
            self._delete_where(collisions, f"constructor arity {member.arity}")
        elif member.is_method:
            collisions = self.target.find_methods_by_name(member.name)
            self._delete_where(collisions, "name collision")

        self._insert(member)

    def ensure_sentinel(
        self, has_null_sentinel: bool, make_sentinel: Callable[[], MemberSpec]
    ) -> bool:
        """
        Add the ``Null`` constant unless one was detected.

        An existing sentinel is trusted as is.

        Returns:
            True if a constant was added
        """
        if has_null_sentinel:
            return False
        self._insert(make_sentinel())
        return True

    def remove_zero_arg_constructors(self) -> int:
        """Delete every constructor without parameters."""
        zero_arg = [c for c in self.target.constructors() if c.arity == 0]
        return self._delete_where(zero_arg, "zero-argument constructor")
