"""pi-textfit: wrap and truncate text into fixed-size terminal grids."""

# Components (re-exported from components package)
from pi.textfit.components import ContentBox, MultiLineText, Title

# Composition
from pi.textfit.compositor import (
    RenderedLine,
    compose_paragraph,
    compose_paragraphs,
    draw_lines,
    paragraph_from_sentences,
    rendered_right_edge,
    split_fields,
    truncate_with_suffix,
)

# Configuration
from pi.textfit.config import LayoutConfig, get_config, set_config

# Errors
from pi.textfit.errors import (
    InvalidDimensionsError,
    InvalidWidthError,
    NoCandidateFoundError,
    OutOfBoundsError,
    SuffixTooLongError,
    TextFitError,
    TooManyLinesError,
    WordTooLongError,
)

# Line estimation
from pi.textfit.estimate import estimate_line_count

# Grid
from pi.textfit.grid import EMPTY_CELL, Grid, StyledCell, cells_from_text

# Line packing
from pi.textfit.line_set import LineBuilder, LineSet, furthest_right_edge, render_line_set

# Optimization
from pi.textfit.optimizer import WrapCandidate, WrapOptimizer, sqm, wrap

__all__ = [
    # Components
    "ContentBox",
    "MultiLineText",
    "Title",
    # Composition
    "RenderedLine",
    "compose_paragraph",
    "compose_paragraphs",
    "draw_lines",
    "paragraph_from_sentences",
    "rendered_right_edge",
    "split_fields",
    "truncate_with_suffix",
    # Configuration
    "LayoutConfig",
    "get_config",
    "set_config",
    # Errors
    "InvalidDimensionsError",
    "InvalidWidthError",
    "NoCandidateFoundError",
    "OutOfBoundsError",
    "SuffixTooLongError",
    "TextFitError",
    "TooManyLinesError",
    "WordTooLongError",
    # Estimation
    "estimate_line_count",
    # Grid
    "EMPTY_CELL",
    "Grid",
    "StyledCell",
    "cells_from_text",
    # Line packing
    "LineBuilder",
    "LineSet",
    "furthest_right_edge",
    "render_line_set",
    # Optimization
    "WrapCandidate",
    "WrapOptimizer",
    "sqm",
    "wrap",
]
