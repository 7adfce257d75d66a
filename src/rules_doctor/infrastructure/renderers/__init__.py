"""Report renderers."""

from rules_doctor.infrastructure.renderers.markdown_renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
