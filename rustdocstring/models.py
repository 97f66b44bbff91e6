"""Core data models shared across rustdocstring components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class ItemKind(str, Enum):
    """Declaration categories that have a documentation analyzer."""

    FUNCTION = "function"
    STRUCT = "struct"
    ENUM = "enum"


@dataclass(frozen=True)
class Unsupported:
    """A declaration the classifier recognised but cannot document."""

    text: str
    keyword: Optional[str] = None


class Visibility(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    SCOPED = "scoped"


@dataclass(frozen=True)
class Modifiers:
    """Qualifiers written in front of an item keyword."""

    visibility: Visibility = Visibility.PRIVATE
    scope: Optional[str] = None
    is_const: bool = False
    is_async: bool = False
    is_unsafe: bool = False
    is_extern: bool = False
    abi: Optional[str] = None


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str


@dataclass(frozen=True)
class Field:
    """A struct member; tuple members are named ``field_N``."""

    name: str
    type: str


class VariantShape(str, Enum):
    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Variant:
    """One enum member with its payload shape."""

    shape: VariantShape
    name: str
    raw: str
    types: Tuple[str, ...] = ()
    fields: Tuple[str, ...] = ()


@dataclass
class FunctionSignature:
    """Structural view of a ``fn`` declaration."""

    name: str
    modifiers: Modifiers
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    is_fallible: bool = False
    is_public_or_extern: bool = False


@dataclass
class StructSignature:
    """Structural view of a field-style or tuple-style ``struct``."""

    name: str
    is_tuple: bool
    fields: List[Field] = field(default_factory=list)
    is_public_or_extern: bool = False


@dataclass
class EnumSignature:
    """Structural view of an ``enum`` and its variants."""

    name: str
    variants: List[Variant] = field(default_factory=list)
    is_public_or_extern: bool = False

    @property
    def default_variant(self) -> str:
        """Name of the variant used for example instantiation."""
        first = self.variants[0].raw
        for index, char in enumerate(first):
            if char in "({":
                return first[:index].strip()
        return first.strip()
