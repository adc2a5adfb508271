"""
Host-facing view of the class being edited.

The generator only talks to a ``ClassTarget``: it queries fields and
members, appends new members and deletes stale ones. ``InMemoryClass`` is
the implementation used by the CLI and the convenience API; editor hosts
provide their own on top of their syntax tree and wrap one generation pass
in one atomic edit.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .descriptors import FieldDescriptor, MemberKind, MemberSpec
from .exceptions import AmbiguousTypeError, MutationConflictError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedType:
    """A type name resolved within the edited unit."""

    simple_name: str
    canonical_name: str

    def matches(self, type_name: str) -> bool:
        """True if ``type_name`` refers to this type."""
        return type_name in (self.simple_name, self.canonical_name)


class TypeScope:
    """Types declared in the unit being edited, keyed by simple name."""

    def __init__(self, declarations: Optional[Dict[str, Iterable[str]]] = None):
        self._declarations: Dict[str, List[str]] = {}
        for simple_name, canonical_names in (declarations or {}).items():
            if isinstance(canonical_names, str):
                canonical_names = [canonical_names]
            for canonical_name in canonical_names:
                self.declare(simple_name, canonical_name)

    def declare(self, simple_name: str, canonical_name: str) -> None:
        names = self._declarations.setdefault(simple_name, [])
        if canonical_name not in names:
            names.append(canonical_name)

    def resolve(self, simple_name: str, package: Optional[str] = None) -> ResolvedType:
        """
        Resolve a simple type name.

        Args:
            simple_name: Type name as written in the class header
            package: Package of the edited unit, used for undeclared names

        Returns:
            ResolvedType; an undeclared name resolves into ``package``, or
            to itself when there is no package

        Raises:
            AmbiguousTypeError: If several canonical names share the simple name
        """
        candidates = self._declarations.get(simple_name, [])
        if len(candidates) > 1:
            raise AmbiguousTypeError(simple_name, candidates)
        if candidates:
            return ResolvedType(simple_name, candidates[0])
        if package:
            return ResolvedType(simple_name, f"{package}.{simple_name}")
        return ResolvedType(simple_name, simple_name)

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._declarations.items()}


class ClassTarget(ABC):
    """Query and mutation capability over one class."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Simple name of the class."""
        pass

    @abstractmethod
    def fields(self) -> List[FieldDescriptor]:
        """Declared fields in declaration order."""
        pass

    @abstractmethod
    def members(self) -> List[MemberSpec]:
        """All members currently on the class."""
        pass

    @abstractmethod
    def add(self, member: MemberSpec) -> None:
        """Append a member to the class."""
        pass

    @abstractmethod
    def delete(self, member: MemberSpec) -> None:
        """Remove a member from the class."""
        pass

    @abstractmethod
    def resolve_own_type(self) -> ResolvedType:
        """Resolve the class's own type in the scope of its unit."""
        pass

    @property
    def is_enum(self) -> bool:
        """True if the class is enum-like and can take generated members."""
        return True

    def find_methods_by_name(self, name: str) -> List[MemberSpec]:
        return [m for m in self.members() if m.is_method and m.name == name]

    def constructors(self) -> List[MemberSpec]:
        return [m for m in self.members() if m.is_constructor]


class InMemoryClass(ClassTarget):
    """A class held entirely in memory."""

    def __init__(
        self,
        name: str,
        fields: Optional[Iterable[FieldDescriptor]] = None,
        members: Optional[Iterable[MemberSpec]] = None,
        scope: Optional[TypeScope] = None,
        package: Optional[str] = None,
        kind: str = "enum",
    ):
        self._name = name
        self._fields: List[FieldDescriptor] = list(fields or [])
        self._members: List[MemberSpec] = list(members or [])
        self.scope = scope or TypeScope()
        self.package = package
        self.kind = kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_enum(self) -> bool:
        return self.kind == "enum"

    def fields(self) -> List[FieldDescriptor]:
        return list(self._fields)

    def members(self) -> List[MemberSpec]:
        return list(self._members)

    def add(self, member: MemberSpec) -> None:
        self._members.append(member)
        if member.kind == MemberKind.CONSTANT:
            # Enum constants are self-typed fields of the class
            self._fields.append(FieldDescriptor(member.name, self._name))
        logger.debug("Added %s %s to %s", member.kind.value, member.name, self._name)

    def delete(self, member: MemberSpec) -> None:
        for index, existing in enumerate(self._members):
            if existing is member:
                del self._members[index]
                logger.debug(
                    "Deleted %s %s from %s", member.kind.value, member.name, self._name
                )
                return
        raise MutationConflictError(
            f"Member {member.name} is no longer present on {self._name}"
        )

    def resolve_own_type(self) -> ResolvedType:
        return self.scope.resolve(self._name, self.package)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryClass":
        """
        Build a class from its descriptor.

        Expected shape::

            {
                "name": "Status",
                "kind": "enum",
                "package": "com.example",
                "fields": [{"name": "code", "type": "int"}],
                "members": [{"kind": "constructor", "name": "Status"}],
                "scope": {"Status": ["com.example.Status"]}
            }

        Constant members without a matching field are recorded as
        self-typed fields, the same way ``add`` records them.
        """
        if not isinstance(data, dict):
            raise ValueError("Class descriptor must be a JSON object")
        if not data.get("name"):
            raise ValueError("Class descriptor missing key: 'name'")
        for key in ("fields", "members"):
            if not isinstance(data.get(key, []), list):
                raise ValueError(f"Class descriptor key '{key}' must be a list")
        scope = data.get("scope")
        if scope is not None and not isinstance(scope, dict):
            raise ValueError("Class descriptor key 'scope' must be an object")

        name = str(data["name"])
        fields = [FieldDescriptor.from_dict(f) for f in data.get("fields", [])]
        members = [MemberSpec.from_dict(m) for m in data.get("members", [])]

        field_names = {f.name for f in fields}
        for member in members:
            if member.kind == MemberKind.CONSTANT and member.name not in field_names:
                fields.append(FieldDescriptor(member.name, name))
                field_names.add(member.name)

        return cls(
            name=name,
            fields=fields,
            members=members,
            scope=TypeScope(scope),
            package=data.get("package"),
            kind=str(data.get("kind", "enum")),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self._name}
        if self.kind != "enum":
            result["kind"] = self.kind
        if self.package:
            result["package"] = self.package
        result["fields"] = [f.to_dict() for f in self._fields]
        result["members"] = [m.to_dict() for m in self._members]
        scope = self.scope.to_dict()
        if scope:
            result["scope"] = scope
        return result

    def __repr__(self) -> str:
        return (
            f"InMemoryClass(name={self._name!r}, fields={len(self._fields)}, "
            f"members={len(self._members)})"
        )
