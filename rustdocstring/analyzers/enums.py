"""Analyzer that documents ``enum`` declarations and their variants."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .base import Analyzer
from .utils import (
    body_between,
    find_keyword,
    is_public_or_extern,
    split_enum_variants,
    split_name_type,
    split_top_level,
    strip_attributes,
    strip_visibility,
)
from ..config import GenerationOptions
from ..lexer import skip_angle_group, strip_line_comment, tokenize
from ..models import EnumSignature, ItemKind, Variant, VariantShape
from ..rendering import DocBuilder
from ..rendering.constants import DESCRIPTIONS, PLACEHOLDERS

_UNIT = re.compile(r"^(\w+)$")
_TUPLE = re.compile(r"^(\w+)\s*\((.+)\)$")
_NAMED = re.compile(r"^(\w+)\s*\{(.+)\}$")

_HANDLERS: Dict[VariantShape, str] = {
    VariantShape.UNIT: "handle_unit",
    VariantShape.TUPLE: "handle_tuple",
    VariantShape.STRUCT: "handle_fields",
    VariantShape.UNKNOWN: "handle_unknown",
}

_PLACEHOLDER_KEYS: Dict[VariantShape, str] = {
    VariantShape.UNIT: "variant",
    VariantShape.TUPLE: "tuple_variant",
    VariantShape.STRUCT: "field_variant",
    VariantShape.UNKNOWN: "variant",
}


class EnumAnalyzer(Analyzer[EnumSignature]):
    """Extract the variants of an enum and classify their payloads."""

    kind = ItemKind.ENUM

    def parse(self, signature: str) -> Optional[EnumSignature]:
        text = "\n".join(strip_line_comment(line) for line in signature.splitlines()).strip()
        tokens = tokenize(text)
        index = find_keyword(tokens, "enum")
        if index == -1:
            return None

        position = skip_angle_group(tokens, index + 2)
        if 0 <= position < len(tokens) and tokens[position].is_ident("where"):
            position = next(
                (offset for offset in range(position, len(tokens)) if tokens[offset].is_punct("{")),
                -1,
            )
        if position == -1 or position >= len(tokens) or not tokens[position].is_punct("{"):
            return None

        body = body_between(text, tokens, position)
        if body is None:
            return None

        variants = [parse_variant(entry) for entry in split_enum_variants(body)]
        variants = [variant for variant in variants if variant.raw]
        if not variants:
            return None

        return EnumSignature(
            name=tokens[index + 1].value,
            variants=variants,
            is_public_or_extern=is_public_or_extern(signature),
        )

    def render(self, item: EnumSignature, options: GenerationOptions) -> str:
        builder = DocBuilder(DESCRIPTIONS["enum"])
        builder.section("variants")

        arms: List[Dict[str, str]] = []
        for variant in item.variants:
            label, pattern = _label_and_pattern(variant)
            slot = builder.placeholder(PLACEHOLDERS[_PLACEHOLDER_KEYS[variant.shape]])
            builder.add(f"- `{label}` - {slot}")
            arms.append({"pattern": pattern, "handler": _HANDLERS[variant.shape]})

        if options.examples_enabled(item.is_public_or_extern):
            builder.example(
                "enum_example.j2",
                name=item.name,
                binding=item.name.lower(),
                default_variant=item.default_variant,
                arms=arms,
            )

        return builder.render()


def parse_variant(entry: str) -> Variant:
    """Classify one variant as unit, tuple, named-field or unknown."""
    raw = " ".join(strip_attributes(entry).split())

    match = _UNIT.match(raw)
    if match:
        return Variant(shape=VariantShape.UNIT, name=match.group(1), raw=raw)

    match = _TUPLE.match(raw)
    if match:
        types = tuple(strip_visibility(part) for part in split_top_level(match.group(2)))
        return Variant(shape=VariantShape.TUPLE, name=match.group(1), raw=raw, types=types)

    match = _NAMED.match(raw)
    if match:
        fields = tuple(
            split_name_type(strip_visibility(strip_attributes(part)))[0]
            for part in split_top_level(match.group(2))
        )
        return Variant(shape=VariantShape.STRUCT, name=match.group(1), raw=raw, fields=fields)

    return Variant(shape=VariantShape.UNKNOWN, name=raw, raw=raw)


def _label_and_pattern(variant: Variant) -> Tuple[str, str]:
    """Return the doc bullet label and the match-arm pattern for a variant."""
    if variant.shape is VariantShape.TUPLE:
        bindings = ", ".join(f"v{index}" for index in range(len(variant.types)))
        return (
            f"{variant.name}({', '.join(variant.types)})",
            f"{variant.name}({bindings})",
        )
    if variant.shape is VariantShape.STRUCT:
        names = ", ".join(variant.fields)
        label = f"{variant.name} {{ {names} }}"
        return label, label
    return variant.name, variant.name
