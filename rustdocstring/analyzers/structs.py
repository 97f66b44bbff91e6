"""Analyzer that documents field-style and tuple-style ``struct`` declarations."""

from __future__ import annotations

from typing import List, Optional

from .base import Analyzer
from .utils import (
    body_between,
    find_keyword,
    is_public_or_extern,
    split_name_type,
    split_top_level,
    strip_attributes,
    strip_visibility,
)
from ..config import GenerationOptions
from ..lexer import skip_angle_group, tokenize
from ..models import Field, ItemKind, StructSignature
from ..rendering import DocBuilder
from ..rendering.constants import DESCRIPTIONS, PLACEHOLDERS


class StructAnalyzer(Analyzer[StructSignature]):
    """Extract the members of a struct.

    Unit structs (``struct X;`` or ``struct X {}``) have nothing to document
    and are rejected.
    """

    kind = ItemKind.STRUCT

    def parse(self, signature: str) -> Optional[StructSignature]:
        tokens = tokenize(signature)
        index = find_keyword(tokens, "struct")
        if index == -1:
            return None
        name = tokens[index + 1].value

        position = skip_angle_group(tokens, index + 2)
        if position == -1 or position >= len(tokens):
            return None
        if tokens[position].is_ident("where"):
            position = next(
                (
                    offset
                    for offset in range(position, len(tokens))
                    if tokens[offset].is_punct("{", ";")
                ),
                -1,
            )
            if position == -1:
                return None

        opener = tokens[position]
        if not opener.is_punct("(", "{"):
            return None
        body = body_between(signature, tokens, position)
        if body is None:
            return None

        is_tuple = opener.value == "("
        if is_tuple:
            fields = _tuple_fields(body)
        else:
            if not body.strip():
                return None
            fields = _named_fields(body)

        return StructSignature(
            name=name,
            is_tuple=is_tuple,
            fields=fields,
            is_public_or_extern=is_public_or_extern(signature),
        )

    def render(self, item: StructSignature, options: GenerationOptions) -> str:
        builder = DocBuilder(DESCRIPTIONS["struct"])

        if item.fields:
            builder.section("fields")
            placeholder = PLACEHOLDERS["tuple_field" if item.is_tuple else "field"]
            for field in item.fields:
                slot = builder.placeholder(placeholder)
                builder.add(f"- `{field.name}` (`{field.type}`) - {slot}")

        gated = options.gate_struct_examples
        if not gated or options.examples_enabled(item.is_public_or_extern):
            builder.example(
                "struct_example.j2",
                name=item.name,
                is_tuple=item.is_tuple,
                fields=[field.name for field in item.fields],
            )

        return builder.render()


def _named_fields(body: str) -> List[Field]:
    fields: List[Field] = []
    for entry in split_top_level(body):
        name, type_ = split_name_type(strip_visibility(strip_attributes(entry)))
        if name and type_:
            fields.append(Field(name=name, type=type_))
    return fields


def _tuple_fields(body: str) -> List[Field]:
    types = [strip_visibility(strip_attributes(entry)) for entry in split_top_level(body)]
    return [
        Field(name=f"field_{index}", type=type_)
        for index, type_ in enumerate(item for item in types if item)
    ]
