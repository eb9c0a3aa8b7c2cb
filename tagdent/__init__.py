"""Top-level package for tagdent.

tagdent normalizes multi-line string templates: it interleaves substitution
values into literal fragments, removes the indentation shared by every line,
and can flatten a block into a single line. The main entry points are
`dedent`, `drop_lowest`, `inline` and `custom_dedent`.
"""

from .config import ConfigLoader, DedentConfig, DedentPreset, DropLowestMode
from .errors import ConfigurationError, TagdentError
from .models.datatypes import (
    ApplicationReport,
    BoundTransform,
    MeasuredLines,
    PipelineConfig,
    TransformFailure,
)
from .pipeline.apply import (
    cautiously_apply,
    cautiously_apply_each,
    cautiously_apply_each_with_report,
    cautiously_apply_with_report,
)
from .text import (
    DedentOperation,
    custom_dedent,
    dedent,
    drop_lowest,
    drop_lowest_indents,
    force_maximal_indents,
    gql,
    handle_substitutions,
    inline,
    measure_indents,
    strip_empty_first_and_last,
)

__all__ = [
    "ApplicationReport",
    "BoundTransform",
    "ConfigLoader",
    "ConfigurationError",
    "DedentConfig",
    "DedentOperation",
    "DedentPreset",
    "DropLowestMode",
    "MeasuredLines",
    "PipelineConfig",
    "TagdentError",
    "TransformFailure",
    "__version__",
    "cautiously_apply",
    "cautiously_apply_each",
    "cautiously_apply_each_with_report",
    "cautiously_apply_with_report",
    "custom_dedent",
    "dedent",
    "drop_lowest",
    "drop_lowest_indents",
    "force_maximal_indents",
    "gql",
    "handle_substitutions",
    "inline",
    "measure_indents",
    "strip_empty_first_and_last",
]

__version__ = "0.1.0"
