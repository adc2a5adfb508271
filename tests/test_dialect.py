from __future__ import annotations

import textwrap

from enum_generator.codegen.core.descriptors import MemberKind, MemberSpec, Parameter
from enum_generator.codegen.core.generator import EnumMemberGenerator
from enum_generator.codegen.core.target import InMemoryClass


def test_render_regenerated_class(status_class, java) -> None:
    EnumMemberGenerator(dialect=java).generate(status_class)
    code = java.render_class(status_class)

    assert code.startswith("package com.example;\n\npublic enum Status {\n    Null;\n")
    assert "    private int code;\n    private String desc;\n" in code
    assert (
        textwrap.indent(
            "public static Status valueOfDesc(String desc) {\n"
            "    for (Status obj : Status.values()) {",
            "    ",
        )
        in code
    )
    assert "    Status(int code, String desc) {\n        this.code = code;\n" in code
    assert code.endswith("}\n")
    assert "\n\n\n" not in code


def test_render_without_package_or_constants(java) -> None:
    cls = InMemoryClass("Bare")
    code = java.render_class(cls)
    assert code == "public enum Bare {\n    ;\n}\n"


def test_render_stub_for_members_without_text(java) -> None:
    cls = InMemoryClass(
        "Level",
        members=[
            MemberSpec(kind=MemberKind.CONSTRUCTOR, name="Level"),
            MemberSpec(
                kind=MemberKind.METHOD,
                name="describe",
                parameters=(Parameter("verbose", "boolean"),),
                return_type="String",
            ),
        ],
    )
    code = java.render_class(cls)
    assert "    Level() {\n    }\n" in code
    assert "    public String describe(boolean verbose) {\n    }\n" in code


def test_constant_text_is_used_for_sentinels(java) -> None:
    cls = InMemoryClass.from_dict(
        {
            "name": "Level",
            "fields": [{"name": "LOW", "type": "Level"}, {"name": "rank", "type": "int"}],
            "members": [{"kind": "constant", "name": "LOW", "text": "LOW(1)"}],
        }
    )
    code = java.render_class(cls)
    assert "    LOW(1);\n" in code
    assert code.count("LOW(1)") == 1


def test_language_properties(java) -> None:
    assert java.language_name == "java"
    assert java.file_extension == ".java"
    assert "class" in java.reserved_words
    assert java.template_exists("accessor.java.j2")
