from __future__ import annotations

import pytest

from enum_generator.codegen.core.config import GeneratorConfig
from enum_generator.codegen.core.descriptors import MemberKind, MemberSpec, Parameter
from enum_generator.codegen.core.exceptions import AmbiguousTypeError
from enum_generator.codegen.core.generator import EnumMemberGenerator, generate_members
from enum_generator.codegen.core.target import InMemoryClass


def _snapshot(cls) -> list[tuple]:
    return sorted(
        (m.kind.value, m.name, tuple(p.type for p in m.parameters), m.text or "")
        for m in cls.members()
    )


def _names(cls, kind: MemberKind) -> list[str]:
    return [m.name for m in cls.members() if m.kind == kind]


def test_status_scenario(status_class) -> None:
    result = EnumMemberGenerator().generate(status_class)

    assert result.success
    assert not result.skipped
    assert set(result.added_names) == {
        "getCode",
        "setCode",
        "valueOfCode",
        "getDesc",
        "setDesc",
        "valueOfDesc",
        "Status",
    }
    assert result.metadata["sentinel_added"] is False
    assert _names(status_class, MemberKind.CONSTANT) == []

    (constructor,) = status_class.constructors()
    assert constructor.parameters == (Parameter("code", "int"), Parameter("desc", "String"))
    assert constructor.text.splitlines()[0] == "Status(int code, String desc) {"


def test_constructor_preserves_field_order(make_class) -> None:
    cls = make_class("Pair", ("Null", "Pair"), ("a", "int"), ("b", "string"))
    EnumMemberGenerator().generate(cls)

    (constructor,) = cls.constructors()
    lines = constructor.text.splitlines()
    assert lines[0] == "Pair(int a, string b) {"
    assert lines[1].strip() == "this.a = a;"
    assert lines[2].strip() == "this.b = b;"


def test_regeneration_is_idempotent(status_class) -> None:
    generator = EnumMemberGenerator()
    generator.generate(status_class)
    first = _snapshot(status_class)
    first_fields = status_class.fields()

    second = generator.generate(status_class)

    assert _snapshot(status_class) == first
    assert status_class.fields() == first_fields
    assert len(second.removed) == len(second.added)


def test_idempotent_when_sentinel_is_created(make_class) -> None:
    cls = make_class("Level", ("rank", "int"))
    generator = EnumMemberGenerator()

    first = generator.generate(cls)
    assert first.metadata["sentinel_added"] is True
    snapshot = _snapshot(cls)

    second = generator.generate(cls)
    assert second.metadata["sentinel_added"] is False
    assert _snapshot(cls) == snapshot
    assert [f.name for f in cls.fields()] == ["rank", "Null"]


def test_boolean_field_keeps_accessor_and_quirk_mutator(make_class) -> None:
    cls = make_class("Flag", ("Null", "Flag"), ("active", "boolean"))
    generator = EnumMemberGenerator()

    for _ in range(2):
        generator.generate(cls)
        signatures = sorted(m.signature for m in cls.find_methods_by_name("isActive"))
        assert signatures == [("isActive", ()), ("isActive", ("boolean",))]
        assert cls.find_methods_by_name("setActive") == []


def test_sentinel_added_once_and_named_null(make_class) -> None:
    cls = make_class("Level", ("LOW", "Level"), ("rank", "int"))
    result = EnumMemberGenerator().generate(cls)

    constants = _names(cls, MemberKind.CONSTANT)
    assert constants == ["Null"]
    assert result.metadata["sentinel_added"] is True


def test_existing_null_like_sentinel_is_trusted(make_class) -> None:
    cls = make_class("Level", ("NullLevel", "Level"), ("rank", "int"))
    result = EnumMemberGenerator().generate(cls)

    assert _names(cls, MemberKind.CONSTANT) == []
    (lookup,) = cls.find_methods_by_name("valueOfRank")
    assert lookup.text.splitlines()[-2].strip() == "return Null;"
    assert any("NullLevel" in w for w in result.warnings)


def test_zero_arg_constructors_removed(make_class) -> None:
    members = [
        MemberSpec(kind=MemberKind.CONSTRUCTOR, name="Level"),
        MemberSpec(kind=MemberKind.CONSTRUCTOR, name="Level"),
    ]
    cls = make_class("Level", ("Null", "Level"), ("rank", "int"), ("label", "String"), members=members)
    EnumMemberGenerator().generate(cls)

    constructors = cls.constructors()
    assert [c.arity for c in constructors] == [2]


def test_sentinel_only_class_gets_no_constructor(make_class) -> None:
    members = [MemberSpec(kind=MemberKind.CONSTRUCTOR, name="Only")]
    cls = make_class("Only", ("A", "Only"), ("B", "Only"), members=members)
    result = EnumMemberGenerator().generate(cls)

    assert cls.constructors() == []
    assert result.added_names == ["Null"]


def test_fieldless_class_is_a_no_op(make_class) -> None:
    existing = MemberSpec(kind=MemberKind.CONSTRUCTOR, name="Empty")
    cls = make_class("Empty", members=[existing])
    result = EnumMemberGenerator().generate(cls)

    assert result.skipped
    assert result.success
    assert result.added == []
    assert cls.members() == [existing]


def test_hand_written_methods_survive(make_class) -> None:
    helper = MemberSpec(kind=MemberKind.METHOD, name="describe", text="public String describe() {\n}")
    cls = make_class("Level", ("Null", "Level"), ("rank", "int"), members=[helper])
    EnumMemberGenerator().generate(cls)
    assert helper in cls.members()


def test_stale_generated_overloads_are_collapsed(make_class) -> None:
    stale = MemberSpec(
        kind=MemberKind.METHOD,
        name="valueOfRank",
        parameters=(Parameter("rank", "String"),),
    )
    cls = make_class("Level", ("Null", "Level"), ("rank", "int"), members=[stale])
    result = EnumMemberGenerator().generate(cls)

    assert stale in result.removed
    (lookup,) = cls.find_methods_by_name("valueOfRank")
    assert lookup.signature == ("valueOfRank", ("int",))


def test_ambiguous_type_propagates_and_leaves_class_untouched(make_class) -> None:
    cls = make_class("Level", ("rank", "int"), scope={"Level": ["a.Level", "b.Level"]})
    with pytest.raises(AmbiguousTypeError):
        generate_members(cls)
    assert cls.members() == []


def test_unknown_language_reports_error(make_class) -> None:
    cls = make_class("Level", ("rank", "int"))
    result = generate_members(cls, GeneratorConfig(language="cobol"))
    assert not result.success
    assert "cobol" in result.error_message


def test_reserved_field_name_warns(make_class) -> None:
    cls = make_class("Token", ("Null", "Token"), ("default", "String"))
    result = EnumMemberGenerator().generate(cls)
    assert any("'default'" in w and "reserved" in w for w in result.warnings)


def test_canonical_sentinel_type_without_scope() -> None:
    target = InMemoryClass.from_dict(
        {
            "name": "Status",
            "package": "com.example",
            "fields": [
                {"name": "Null", "type": "com.example.Status"},
                {"name": "code", "type": "int"},
            ],
        }
    )
    result = EnumMemberGenerator().generate(target)

    assert result.metadata["data_fields"] == 1
    assert result.metadata["sentinel_added"] is False
    assert set(result.added_names) == {"getCode", "setCode", "valueOfCode", "Status"}
    (constructor,) = target.constructors()
    assert constructor.text.splitlines()[0] == "Status(int code) {"

    EnumMemberGenerator().generate(target)
    assert _names(target, MemberKind.CONSTANT) == []
    assert len(target.constructors()) == 1


def test_constant_member_in_descriptor_is_a_sentinel() -> None:
    target = InMemoryClass.from_dict(
        {
            "name": "Level",
            "fields": [{"name": "rank", "type": "int"}],
            "members": [{"kind": "constant", "name": "Null"}],
        }
    )
    result = EnumMemberGenerator().generate(target)

    assert result.metadata["sentinel_added"] is False
    assert _names(target, MemberKind.CONSTANT) == ["Null"]
    assert [f.name for f in target.fields()] == ["rank", "Null"]


def test_non_enum_class_is_a_no_op() -> None:
    target = InMemoryClass.from_dict(
        {"name": "Holder", "kind": "class", "fields": [{"name": "code", "type": "int"}]}
    )
    result = EnumMemberGenerator().generate(target)

    assert result.skipped
    assert result.success
    assert result.metadata["reason"] == "not an enum"
    assert target.members() == []
    assert target.to_dict()["kind"] == "class"
