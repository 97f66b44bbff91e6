"""Base classes for item analyzers."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..config import GenerationOptions
from ..logging import get_logger
from ..models import ItemKind

T = TypeVar("T")


class Analyzer(ABC, Generic[T]):
    """Contract for analyzers that turn one declaration into a doc template.

    ``parse`` decomposes a normalized signature into a typed model and
    returns ``None`` when the declaration does not have the expected shape;
    ``render`` assembles the template for a parsed model.
    """

    kind: ItemKind

    def __init__(self) -> None:
        self.logger = get_logger(f"analyzers.{self.kind.value}")

    def supports(self, signature: str) -> bool:
        """Return True when this analyzer can document ``signature``."""
        return self.parse(signature) is not None

    @abstractmethod
    def parse(self, signature: str) -> Optional[T]:
        """Extract the structural parts of ``signature``."""

    @abstractmethod
    def render(self, item: T, options: GenerationOptions) -> str:
        """Assemble the doc-comment template for a parsed item."""

    def analyze(
        self, signature: str, options: GenerationOptions | None = None
    ) -> Optional[str]:
        item = self.parse(signature)
        if item is None:
            self.logger.debug("Rejected %s declaration: %s", self.kind.value, signature)
            return None
        return self.render(item, options or GenerationOptions())
