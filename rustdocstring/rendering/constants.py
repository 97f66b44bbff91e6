"""Shared text constants for generated doc comments."""

from __future__ import annotations

DOC_PREFIX = "///"

SECTION_TITLES: dict[str, str] = {
    "arguments": "Arguments",
    "returns": "Returns",
    "safety": "Safety",
    "errors": "Errors",
    "examples": "Examples",
    "fields": "Fields",
    "variants": "Variants",
}

DESCRIPTIONS: dict[str, str] = {
    "function": "Describe this function.",
    "struct": "Describe this struct.",
    "enum": "Describe this enum.",
}

PLACEHOLDERS: dict[str, str] = {
    "parameter": "Describe this parameter.",
    "returns": "Describe the return value.",
    "unsafe": "Describe unsafe behavior.",
    "errors": "Describe possible errors.",
    "field": "Describe this field.",
    "tuple_field": "Describe this tuple field.",
    "variant": "Describe this variant.",
    "tuple_variant": "Describe this tuple variant.",
    "field_variant": "Describe this field variant.",
    "module": "...",
}

SAFETY_DETAIL_LINES: tuple[str, ...] = (
    "- **The caller must ensure that:**",
    "  - Any internal state or memory accessed by this function is in a valid state.",
    "  - Preconditions specific to this function's logic are satisfied.",
    "  - This function is only called in the correct program state to avoid UB.",
)

UNSAFE_REASON_HEADING = "- **This function is `unsafe` because:**"

SAFETY_COMMENT = "// SAFETY: The Caller guarantees all invariants are met."


__all__ = [
    "DESCRIPTIONS",
    "DOC_PREFIX",
    "PLACEHOLDERS",
    "SAFETY_COMMENT",
    "SAFETY_DETAIL_LINES",
    "SECTION_TITLES",
    "UNSAFE_REASON_HEADING",
]
