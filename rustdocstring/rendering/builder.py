"""Assembles doc-comment templates with numbered snippet placeholders."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .constants import DOC_PREFIX, PLACEHOLDERS, SECTION_TITLES


class PlaceholderCounter:
    """Hands out snippet slot numbers for one generation call.

    Slot 1 always belongs to the top-level description, so counting starts
    at 2.
    """

    def __init__(self, start: int = 2) -> None:
        self._next = start

    @property
    def next_slot(self) -> int:
        return self._next

    def reserve(self) -> int:
        slot = self._next
        self._next += 1
        return slot


class DocBuilder:
    """Collects doc-comment lines and renders them as an editor snippet."""

    def __init__(
        self,
        description: str,
        *,
        counter: PlaceholderCounter | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        self.counter = counter or PlaceholderCounter()
        self._lines: List[str] = [f" ${{1:{description}}}"]
        self._env = _create_env(templates_dir or Path(__file__).with_name("templates"))

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def placeholder(self, default: str) -> str:
        """Reserve the next slot and return its ``${n:default}`` token."""
        return f"${{{self.counter.reserve()}:{default}}}"

    def add(self, *lines: str) -> None:
        self._lines.extend(lines)

    def extend(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)

    def section(self, key: str) -> None:
        """Open a ``# Title`` section surrounded by blank lines."""
        title = SECTION_TITLES.get(key, key.title())
        self._lines.extend(["", f"# {title}", ""])

    def example(self, template_name: str, **context: Any) -> None:
        """Render an ``# Examples`` section from a code-block template.

        The module placeholder is reserved here, after every placeholder that
        precedes the section.
        """
        self.section("examples")
        context["module"] = self.placeholder(PLACEHOLDERS["module"])
        template = self._env.get_template(template_name)
        self._lines.extend(template.render(**context).splitlines())

    def render(self) -> str:
        """Join the lines, prefixing every line after the first with ``///``.

        The first line is inserted right after a ``///`` the user already typed.
        """
        first, *rest = self._lines
        return "\n".join([first, *(f"{DOC_PREFIX} {line}" for line in rest)])


@lru_cache(maxsize=None)
def _create_env(templates_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )


__all__ = ["DocBuilder", "PlaceholderCounter"]
