"""Analyzer that documents ``fn`` declarations."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .base import Analyzer
from .utils import (
    is_public_or_extern,
    is_receiver,
    is_result_type,
    modifiers_before,
    split_name_type,
    split_top_level,
    strip_attributes,
)
from ..config import GenerationOptions
from ..lexer import IDENT, Token, find_closing, skip_angle_group, tokenize
from ..models import FunctionSignature, ItemKind, Parameter
from ..rendering import DocBuilder
from ..rendering.constants import (
    DESCRIPTIONS,
    PLACEHOLDERS,
    SAFETY_COMMENT,
    SAFETY_DETAIL_LINES,
    UNSAFE_REASON_HEADING,
)


class FunctionAnalyzer(Analyzer[FunctionSignature]):
    """Extract name, modifiers, parameters and return type of a function."""

    kind = ItemKind.FUNCTION

    def parse(self, signature: str) -> Optional[FunctionSignature]:
        tokens = tokenize(signature)
        located = _locate_function(tokens)
        if located is None:
            return None
        fn_index, open_index = located
        close_index = find_closing(tokens, open_index)
        if close_index == -1:
            return None

        modifiers, _ = modifiers_before(signature, tokens, fn_index)
        arguments = signature[tokens[open_index].end : tokens[close_index].start]
        return_type = _return_type(signature, tokens, close_index + 1)

        return FunctionSignature(
            name=tokens[fn_index + 1].value,
            modifiers=modifiers,
            parameters=_parse_parameters(arguments),
            return_type=return_type,
            is_fallible=is_result_type(return_type),
            is_public_or_extern=is_public_or_extern(signature),
        )

    def render(self, item: FunctionSignature, options: GenerationOptions) -> str:
        builder = DocBuilder(DESCRIPTIONS["function"])
        modifiers = item.modifiers

        if item.parameters:
            builder.section("arguments")
            for parameter in item.parameters:
                slot = builder.placeholder(PLACEHOLDERS["parameter"])
                builder.add(f"- `{parameter.name}` (`{parameter.type}`) - {slot}")

        if item.return_type:
            builder.section("returns")
            slot = builder.placeholder(PLACEHOLDERS["returns"])
            builder.add(f"- `{item.return_type}` - {slot}")

        if modifiers.is_unsafe or modifiers.is_extern:
            builder.section("safety")
            if options.include_safety_details:
                builder.extend(SAFETY_DETAIL_LINES)
            if modifiers.is_unsafe:
                slot = builder.placeholder(PLACEHOLDERS["unsafe"])
                builder.add(UNSAFE_REASON_HEADING, f"  - {slot}")

        if item.is_fallible:
            builder.section("errors")
            builder.add(builder.placeholder(PLACEHOLDERS["errors"]))

        if options.examples_enabled(item.is_public_or_extern):
            builder.example(
                "function_example.j2",
                name=item.name,
                is_async=modifiers.is_async,
                is_unsafe=modifiers.is_unsafe,
                safety_comment=SAFETY_COMMENT,
            )

        return builder.render()


def _locate_function(tokens: Sequence[Token]) -> Optional[Tuple[int, int]]:
    """Find ``fn <name> [<generics>] (`` and return the ``fn`` and ``(`` indices."""
    for index in range(len(tokens) - 2):
        if not tokens[index].is_ident("fn") or tokens[index + 1].kind != IDENT:
            continue
        open_index = skip_angle_group(tokens, index + 2)
        if 0 <= open_index < len(tokens) and tokens[open_index].is_punct("("):
            return index, open_index
    return None


def _parse_parameters(arguments: str) -> List[Parameter]:
    parameters: List[Parameter] = []
    for entry in split_top_level(arguments):
        entry = strip_attributes(entry)
        if not entry or is_receiver(entry):
            continue
        name, type_ = split_name_type(entry)
        parameters.append(Parameter(name=name, type=type_))
    return parameters


def _return_type(signature: str, tokens: Sequence[Token], index: int) -> Optional[str]:
    """Text after ``->`` up to a top-level ``{``, ``;``, ``=>`` or ``where``."""
    if index >= len(tokens) or not tokens[index].is_punct("->"):
        return None
    stop = len(signature)
    depth = 0
    for token in tokens[index + 1 :]:
        if token.is_punct("(", "["):
            depth += 1
        elif token.is_punct(")", "]"):
            depth -= 1
        elif depth == 0 and (token.is_punct("{", ";", "=>") or token.is_ident("where")):
            stop = token.start
            break
    cleaned = signature[tokens[index].end : stop].strip()
    return cleaned or None
