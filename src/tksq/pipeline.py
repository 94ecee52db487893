"""Run the compression stages over a text and measure the result."""

from __future__ import annotations

import time

from tksq.preserver import PatternPreserver
from tksq.stages import CleanupStage, SemanticStage, ShorthandStage, Stage, StructuralStage
from tksq.tokenizer import TokenCounterFactory
from tksq.types import (
    CONTENT_TYPES,
    LEVELS,
    Change,
    CompressionStats,
    PipelineConfig,
    PipelineResult,
    StageOptions,
    StageStats,
    reduction_percent,
)

# Fixed execution order; a level only ever selects from it.
_STAGES: dict[str, Stage] = {
    stage.id: stage
    for stage in (CleanupStage(), SemanticStage(), StructuralStage(), ShorthandStage())
}

LEVEL_STAGES: dict[str, tuple[str, ...]] = {
    "light": ("cleanup",),
    "medium": ("cleanup", "semantic"),
    "aggressive": ("cleanup", "semantic", "structural", "shorthand"),
}

_preserver = PatternPreserver()


def available_stages() -> list[str]:
    return list(_STAGES)


def stages_for_level(level: str) -> list[str]:
    """Stage ids a compression level runs, in execution order.

    Raises:
        ValueError: If *level* is not a known compression level.
    """
    stages = LEVEL_STAGES.get(level)
    if stages is None:
        raise ValueError(f"Unknown level: {level}. Available: {', '.join(LEVELS)}")
    return list(stages)


def _resolve_stages(config: PipelineConfig) -> list[Stage]:
    level_stages = stages_for_level(config.level)
    if config.stages is None:
        return [_STAGES[stage_id] for stage_id in level_stages]
    for stage_id in config.stages:
        if stage_id not in _STAGES:
            raise ValueError(
                f'Unknown stage "{stage_id}". Available stages: {", ".join(_STAGES)}'
            )
    requested = set(config.stages)
    # Explicit lists still run in pipeline order.
    return [stage for stage_id, stage in _STAGES.items() if stage_id in requested]


def compress(text: str, config: PipelineConfig) -> PipelineResult:
    """Compress *text* with the stages selected by *config*.

    Protected regions (code, URLs, long quotes, ``config.preserve_patterns``)
    are swapped for placeholders before the first stage and restored after
    the last one, so no stage can alter them.

    Args:
        text: The input text.
        config: Level or explicit stage list, dictionary, tokenizer and
            content type for this run.

    Returns:
        The compressed text, token/char statistics per stage and overall,
        and every change the stages made.

    Raises:
        ValueError: If the level, a stage id, the tokenizer or the content
            type is unknown.
    """
    if config.content_type not in CONTENT_TYPES:
        raise ValueError(
            f"Unknown content type: {config.content_type}. Available: {', '.join(CONTENT_TYPES)}"
        )
    stages = _resolve_stages(config)
    counter = TokenCounterFactory.create_ready(config.tokenizer)

    original_tokens = counter.count(text)
    working, regions = _preserver.extract(text, config.preserve_patterns)
    options = StageOptions(
        level=config.level,
        dictionary=config.dictionary,
        preserved_regions=tuple(regions),
        content_type=config.content_type,
    )

    changes: list[Change] = []
    breakdown: list[StageStats] = []
    for stage in stages:
        tokens_in = counter.count(working)
        started = time.perf_counter()
        result = stage.process(working, options)
        elapsed_ms = (time.perf_counter() - started) * 1000
        tokens_out = counter.count(result.text)
        breakdown.append(
            StageStats(
                stage=stage.name,
                tokens_in=tokens_in,
                tokens_out=tokens_out,
                reduction_percent=reduction_percent(tokens_in, tokens_out),
                time_ms=round(elapsed_ms, 3),
            )
        )
        changes.extend(result.changes)
        working = result.text

    compressed = _preserver.restore(working, regions)
    compressed_tokens = counter.count(compressed)
    stats = CompressionStats(
        original_tokens=original_tokens,
        compressed_tokens=compressed_tokens,
        reduction_percent=reduction_percent(original_tokens, compressed_tokens),
        original_chars=len(text),
        compressed_chars=len(compressed),
        stage_breakdown=tuple(breakdown),
        tokenizer=counter.name,
    )
    return PipelineResult(compressed=compressed, stats=stats, changes=tuple(changes))
