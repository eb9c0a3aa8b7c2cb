"""Dedent and inline operations for multi-line templates.

Responsibilities:
- Combine substitution interleaving, boundary trimming, indent measurement
  and an indent policy into one callable operation.
- Expose the canonical presets as shared, immutable operations.

Key public names:
- `DedentOperation`: a configured, reusable dedent callable.
- `dedent`, `drop_lowest`, `gql`, `inline`: ready-made operations.
- `custom_dedent`: returns an operation for a given configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from ..config import (
    DEFAULT_WHITESPACE,
    ConfigLoader,
    DedentConfig,
    DedentPreset,
    DropLowestMode,
)
from ..models.datatypes import MeasuredLines, PipelineConfig
from .indents import count_leading_whitespace, measure_indents, strip_trailing_whitespace
from .plugins import (
    drop_lowest_indents,
    drop_lowest_minority_indents,
    force_maximal_indents,
    keep_indents,
    strip_empty_first_and_last,
    strip_line,
)
from .substitutions import handle_substitutions


_INDENT_POLICIES: Mapping[DropLowestMode, Callable[[MeasuredLines], MeasuredLines]] = (
    MappingProxyType(
        {
            DropLowestMode.OFF: keep_indents,
            DropLowestMode.ALWAYS: drop_lowest_indents,
            DropLowestMode.MINORITY: drop_lowest_minority_indents,
        }
    )
)


@dataclass(frozen=True, slots=True)
class DedentOperation:
    """A reusable dedent pipeline.

    Calling the operation interleaves substitutions, measures the block with
    the configured hooks, then strips trailing whitespace and up to `excess`
    leading whitespace characters from every line before joining them.

    Attributes:
        pipeline: Hooks used while measuring.
        separator: String placed between output lines.
        whitespace: Regex character class counted as indentation.
        log: Whether suppressed hook failures are logged.
    """

    pipeline: PipelineConfig
    separator: str = "\n"
    whitespace: str = DEFAULT_WHITESPACE
    log: bool = True

    def __call__(
        self,
        fragments: str | Sequence[str],
        substitutions: Sequence[Any] | None = None,
    ) -> str:
        """Return the interleaved block with shared indentation and trailing space removed."""

        text = handle_substitutions(fragments, substitutions, log=self.log)
        measured = measure_indents(text, self.pipeline, self.whitespace, self.log)
        excess = measured.excess
        return self.separator.join(self._strip(line, excess) for line in measured.lines)

    def _strip(self, line: str, excess: int) -> str:
        """Drop trailing whitespace, then at most `excess` leading whitespace characters."""

        line = strip_trailing_whitespace(line, self.whitespace)
        leading = count_leading_whitespace(line, self.whitespace)
        return line[min(leading, excess) :]


def build_operation(config: DedentConfig) -> DedentOperation:
    """Build a fresh dedent operation for validated options."""

    policy = _INDENT_POLICIES[config.drop_lowest]
    if config.drop_lowest_threshold is not None:
        policy = partial(drop_lowest_minority_indents, threshold=config.drop_lowest_threshold)

    return DedentOperation(
        pipeline=PipelineConfig(
            pre_work=(strip_empty_first_and_last,),
            post_work=(policy,),
        ),
        whitespace=config.whitespace,
        log=config.log_failures,
    )


_PRESET_OPERATIONS: Mapping[DedentPreset, DedentOperation] = MappingProxyType(
    {
        DedentPreset.PLAIN: build_operation(DedentConfig()),
        DedentPreset.DROP_LOWEST: build_operation(
            DedentConfig(drop_lowest=DropLowestMode.ALWAYS)
        ),
    }
)

dedent = _PRESET_OPERATIONS[DedentPreset.PLAIN]
drop_lowest = _PRESET_OPERATIONS[DedentPreset.DROP_LOWEST]

# Same object as `dedent`; the name lets editors highlight embedded GraphQL.
gql = dedent

inline = DedentOperation(
    pipeline=PipelineConfig(
        pre_work=(strip_empty_first_and_last,),
        per_line=(strip_line,),
        post_work=(force_maximal_indents,),
    ),
    separator=" ",
)


def custom_dedent(
    config: DedentConfig | Mapping[str, Any] | None = None,
) -> DedentOperation:
    """Return a dedent operation for the given options.

    The two canonical configurations (plain, drop-lowest) return shared
    preset operations; anything else builds a new one.

    Raises:
        ConfigurationError: If a mapping holds unsupported keys or values.
    """

    if config is None:
        resolved = DedentConfig()
    elif isinstance(config, DedentConfig):
        resolved = config
    else:
        resolved = ConfigLoader.from_mapping(config)
    resolved.validate()

    preset = resolved.preset
    if preset is not None:
        return _PRESET_OPERATIONS[preset]
    return build_operation(resolved)
