"""Entry points that turn a source buffer into a doc-comment template."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .analyzers import Analyzer, discover_analyzers
from .classifier import classify_item
from .config import GenerationOptions, RustDocConfig
from .logging import get_logger
from .models import ItemKind, Unsupported
from .scanner import SignatureScanner, SourceBuffer

DOC_TRIGGER = "///"


class DocGenerator:
    """Chains scanner, classifier and analyzers for one generation call."""

    def __init__(
        self,
        analyzers: Optional[Iterable[Analyzer]] = None,
        scanner: SignatureScanner | None = None,
    ) -> None:
        selected = list(analyzers) if analyzers is not None else discover_analyzers()
        self._analyzers: Dict[ItemKind, Analyzer] = {
            analyzer.kind: analyzer for analyzer in selected
        }
        self.scanner = scanner or SignatureScanner()
        self.logger = get_logger("generator")

    @classmethod
    def from_config(cls, config: RustDocConfig) -> "DocGenerator":
        enabled = config.analyzers.enabled or None
        return cls(analyzers=discover_analyzers(enabled))

    @property
    def kinds(self) -> list[ItemKind]:
        return list(self._analyzers)

    def generate_doc(
        self, signature: str, options: GenerationOptions | None = None
    ) -> Optional[str]:
        """Render the template for a normalized signature, or ``None``."""
        kind = classify_item(signature)
        if isinstance(kind, Unsupported):
            self.logger.debug(
                "Unsupported item: %s",
                signature,
                extra={"item_kind": kind.keyword or "unknown"},
            )
            return None
        analyzer = self._analyzers.get(kind)
        if analyzer is None:
            self.logger.debug("No analyzer enabled", extra={"item_kind": kind.value})
            return None
        return analyzer.analyze(signature, options)

    def generate_from_buffer(
        self,
        buffer: SourceBuffer,
        cursor_line: int,
        options: GenerationOptions | None = None,
    ) -> Optional[str]:
        """Scan past ``cursor_line`` and document the item found there."""
        signature = self.scanner.scan(buffer, cursor_line)
        if signature is None:
            return None
        self.logger.debug("Scanned signature: %s", signature)
        return self.generate_doc(signature, options)


def generate_doc(signature: str, options: GenerationOptions | None = None) -> Optional[str]:
    return DocGenerator().generate_doc(signature, options)


def generate_from_buffer(
    buffer: SourceBuffer,
    cursor_line: int,
    options: GenerationOptions | None = None,
) -> Optional[str]:
    return DocGenerator().generate_from_buffer(buffer, cursor_line, options)


def is_doc_trigger(line: str) -> bool:
    """True when the user just typed ``///`` at the end of ``line``."""
    return line.rstrip().endswith(DOC_TRIGGER)


__all__ = [
    "DocGenerator",
    "generate_doc",
    "generate_from_buffer",
    "is_doc_trigger",
]
