"""Template text shaping components.

This package provides substitution interleaving, indentation measurement,
measurement plugins and the dedent/inline operations built from them.
"""

from .operations import DedentOperation, custom_dedent, dedent, drop_lowest, gql, inline
from .indents import count_leading_whitespace, measure_indents, split_lines
from .plugins import (
    MAXIMAL_INDENT,
    drop_lowest_indents,
    drop_lowest_minority_indents,
    force_maximal_indents,
    keep_indents,
    lowest_is_minority,
    strip_empty_first_and_last,
)
from .substitutions import handle_substitutions

__all__ = [
    "DedentOperation",
    "MAXIMAL_INDENT",
    "count_leading_whitespace",
    "custom_dedent",
    "dedent",
    "drop_lowest",
    "drop_lowest_indents",
    "drop_lowest_minority_indents",
    "force_maximal_indents",
    "gql",
    "handle_substitutions",
    "inline",
    "keep_indents",
    "lowest_is_minority",
    "measure_indents",
    "split_lines",
    "strip_empty_first_and_last",
]
