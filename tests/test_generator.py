"""End-to-end tests for the generation entry points."""

from __future__ import annotations

from pathlib import Path

from rustdocstring import (
    DocGenerator,
    GenerationOptions,
    generate_doc,
    generate_from_buffer,
    is_doc_trigger,
    load_config,
)
from rustdocstring.analyzers import StructAnalyzer

SOURCE = [
    "use std::fmt;",
    "",
    "///",
    "#[derive(Debug, Clone)]",
    "pub enum Shape {",
    "    Circle { radius: f64 },",
    "    Square(f64),",
    "    Empty,",
    "}",
    "",
    "///",
    "#[inline]",
    "pub fn area(shape: &Shape) -> f64 {",
    "    0.0",
    "}",
    "",
    "///",
    "trait Draw {",
    "    fn draw(&self);",
    "}",
]


def test_generate_doc_for_function() -> None:
    doc = generate_doc(
        "pub fn compute_sum(a: i32, b: i32) -> i32 {",
        GenerationOptions(include_safety_details=True),
    )

    assert doc is not None
    assert "# Arguments" in doc
    assert "`a` (`i32`)" in doc
    assert "# Returns" in doc


def test_generate_doc_for_struct_and_enum() -> None:
    struct_doc = generate_doc("pub struct Point { x: f64, y: f64 }")
    enum_doc = generate_doc("enum Color { Red, Green, Blue }")

    assert struct_doc is not None and "`x` (`f64`)" in struct_doc
    assert enum_doc is not None and "`Red`" in enum_doc


def test_generate_doc_returns_none_for_unsupported_and_malformed() -> None:
    assert generate_doc("trait SomeTrait {}") is None
    assert generate_doc("union Bits { a: u8 }") is None
    assert generate_doc("enum NotValid") is None
    assert generate_doc("struct Unit;") is None


def test_generate_from_buffer_documents_enum(make_document) -> None:
    doc = generate_from_buffer(make_document(SOURCE), 2)

    assert doc is not None
    assert doc.startswith(" ${1:Describe this enum.}")
    assert "- `Circle { radius }` - ${2:Describe this field variant.}" in doc
    assert "/// let shape = Shape::Circle;" in doc


def test_generate_from_buffer_documents_function() -> None:
    doc = generate_from_buffer(SOURCE, 10, GenerationOptions(include_examples=False))

    assert doc is not None
    assert "- `shape` (`&Shape`) - ${2:Describe this parameter.}" in doc
    assert "# Examples" not in doc


def test_generate_from_buffer_skips_traits_and_bodies() -> None:
    assert generate_from_buffer(SOURCE, 16) is None
    assert generate_from_buffer(SOURCE, 5) is None
    assert generate_from_buffer(SOURCE, len(SOURCE) - 1) is None


def test_disabled_analyzers_yield_no_template() -> None:
    generator = DocGenerator(analyzers=[StructAnalyzer()])

    assert generator.kinds == [StructAnalyzer.kind]
    assert generator.generate_doc("fn a() {}") is None
    assert generator.generate_doc("struct A(u8);") is not None


def test_from_config_honours_enabled_analyzers(tmp_path: Path) -> None:
    (tmp_path / ".rustdocstring.yml").write_text(
        "analyzers:\n  enabled: [enum]\n", encoding="utf-8"
    )

    generator = DocGenerator.from_config(load_config(tmp_path))

    assert generator.generate_doc("enum A { B }") is not None
    assert generator.generate_doc("struct A(u8);") is None


def test_generation_is_idempotent() -> None:
    signature = "pub unsafe fn f(a: u8) -> Result<u8, E> {"

    assert generate_doc(signature) == generate_doc(signature)


def test_is_doc_trigger() -> None:
    assert is_doc_trigger("    ///")
    assert is_doc_trigger("/// ")
    assert not is_doc_trigger("// note")


def test_attribute_lines_are_not_part_of_the_signature() -> None:
    lines = ["///", "#[inline]", "#[must_use]", "fn hello() -> String {", '    "hi".into()', "}"]

    doc = generate_from_buffer(lines, 0)

    assert doc is not None
    assert "- `String` - ${2:Describe the return value.}" in doc
    assert "/// let _ = hello();" in doc
