"""Text layout widgets."""

from pi.textfit.components.content_box import ContentBox
from pi.textfit.components.multi_line_text import MultiLineText
from pi.textfit.components.title import Title

__all__ = [
    "ContentBox",
    "MultiLineText",
    "Title",
]
