"""
Core data structures for member generation.

Describes the fields read from a class and the member definitions
synthesized for it during one generation pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class MemberKind(Enum):
    """Kinds of members a class can hold."""

    ACCESSOR = "accessor"
    MUTATOR = "mutator"
    LOOKUP = "lookup"
    CONSTRUCTOR = "constructor"
    CONSTANT = "constant"
    METHOD = "method"  # Hand-written member of unknown provenance


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field declared on a class."""

    name: str
    declared_type: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldDescriptor":
        """Build a descriptor from ``{"name": ..., "type": ...}``."""
        if not isinstance(data, dict):
            raise ValueError(f"Field descriptor must be an object, got {data!r}")
        try:
            return cls(name=str(data["name"]), declared_type=str(data["type"]))
        except KeyError as e:
            raise ValueError(f"Field descriptor missing key: {e}") from e

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.declared_type}


@dataclass(frozen=True)
class Parameter:
    """One formal parameter of a member."""

    name: str
    type: str

    def render(self) -> str:
        return f"{self.type} {self.name}"


@dataclass
class MemberSpec:
    """
    A member definition produced by the synthesizer.

    ``template`` names the body template used to render ``text``;
    ``context`` holds the variables passed to it. Members read back from
    an existing class usually carry ``text`` only.
    """

    kind: MemberKind
    name: str
    parameters: Tuple[Parameter, ...] = ()
    return_type: Optional[str] = None
    template: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    text: Optional[str] = None

    @property
    def signature(self) -> Tuple[str, Tuple[str, ...]]:
        """Name plus parameter types."""
        return self.name, tuple(p.type for p in self.parameters)

    @property
    def is_constructor(self) -> bool:
        return self.kind == MemberKind.CONSTRUCTOR

    @property
    def is_method(self) -> bool:
        return self.kind in (
            MemberKind.ACCESSOR,
            MemberKind.MUTATOR,
            MemberKind.LOOKUP,
            MemberKind.METHOD,
        )

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemberSpec":
        """Build a member from its serialized form."""
        if not isinstance(data, dict):
            raise ValueError(f"Member descriptor must be an object, got {data!r}")
        try:
            kind = MemberKind(data.get("kind", MemberKind.METHOD.value))
        except ValueError as e:
            raise ValueError(f"Unknown member kind: {data.get('kind')}") from e

        if "name" not in data:
            raise ValueError("Member descriptor missing key: 'name'")

        raw_parameters = data.get("parameters", [])
        if not isinstance(raw_parameters, list):
            raise ValueError(f"Parameters of member {data['name']} must be a list")
        parameters = []
        for p in raw_parameters:
            if not isinstance(p, dict):
                raise ValueError(
                    f"Parameter of member {data['name']} must be an object, got {p!r}"
                )
            try:
                parameters.append(Parameter(name=str(p["name"]), type=str(p["type"])))
            except KeyError as e:
                raise ValueError(
                    f"Parameter of member {data['name']} missing key: {e}"
                ) from e

        return cls(
            kind=kind,
            name=str(data["name"]),
            parameters=tuple(parameters),
            return_type=data.get("return_type"),
            text=data.get("text"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "kind": self.kind.value,
            "name": self.name,
            "parameters": [{"name": p.name, "type": p.type} for p in self.parameters],
        }
        if self.return_type is not None:
            result["return_type"] = self.return_type
        if self.text is not None:
            result["text"] = self.text
        return result


class ConstructorAccumulator:
    """
    Collects constructor parameters and assignments across the data fields.

    Entries keep the order in which fields were added; separators only
    ever appear between two entries.
    """

    def __init__(
        self,
        separator: str = ", ",
        assignment_format: str = "this.{name} = {name};",
    ):
        self.separator = separator
        self.assignment_format = assignment_format
        self._fields: List[FieldDescriptor] = []

    def add(self, field_descriptor: FieldDescriptor) -> None:
        self._fields.append(field_descriptor)

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def parameters(self) -> Tuple[Parameter, ...]:
        return tuple(Parameter(f.name, f.declared_type) for f in self._fields)

    @property
    def parameter_text(self) -> str:
        return self.separator.join(p.render() for p in self.parameters)

    @property
    def assignments(self) -> List[str]:
        return [self.assignment_format.format(name=f.name) for f in self._fields]

    @property
    def body_text(self) -> str:
        return "\n".join(self.assignments)
