"""Generate Rust doc-comment templates for functions, structs and enums."""

__version__ = "0.2.0"

from .classifier import classify, classify_item
from .config import ConfigError, GenerationOptions, load_config
from .generator import DocGenerator, generate_doc, generate_from_buffer, is_doc_trigger
from .models import ItemKind, Unsupported
from .scanner import SignatureScanner, scan

__all__ = [
    "ConfigError",
    "DocGenerator",
    "GenerationOptions",
    "ItemKind",
    "SignatureScanner",
    "Unsupported",
    "classify",
    "classify_item",
    "generate_doc",
    "generate_from_buffer",
    "is_doc_trigger",
    "load_config",
    "scan",
]
