from __future__ import annotations

import json
from pathlib import Path

import pytest

from enum_generator.codegen.core.config import GeneratorConfig
from enum_generator.codegen.core.descriptors import FieldDescriptor
from enum_generator.codegen.core.target import InMemoryClass
from enum_generator.codegen.languages.java import JavaDialect


@pytest.fixture
def status_descriptor() -> dict:
    return {
        "name": "Status",
        "package": "com.example",
        "fields": [
            {"name": "Null", "type": "Status"},
            {"name": "code", "type": "int"},
            {"name": "desc", "type": "String"},
        ],
        "members": [],
    }


@pytest.fixture
def status_class(status_descriptor) -> InMemoryClass:
    return InMemoryClass.from_dict(status_descriptor)


@pytest.fixture
def make_class():
    def _make(name: str, *fields: tuple[str, str], members=None, scope=None):
        from enum_generator.codegen.core.target import TypeScope

        return InMemoryClass(
            name,
            fields=[FieldDescriptor(n, t) for n, t in fields],
            members=members,
            scope=TypeScope(scope),
        )

    return _make


@pytest.fixture
def java() -> JavaDialect:
    return JavaDialect(GeneratorConfig())


@pytest.fixture
def write_descriptor(tmp_path: Path):
    def _write(data: dict, name: str = "descriptor.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
