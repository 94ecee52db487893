#!/usr/bin/env python3
"""
Benchmark suite for tksq.

Measures token reduction, character savings and timing for every compression
level over a corpus of text files.

Usage:
    python benchmarks/run_benchmark.py                          # basic run
    python benchmarks/run_benchmark.py --domain programming     # domain overlay
    python benchmarks/run_benchmark.py --language ru            # force a language pack
    python benchmarks/run_benchmark.py --tokenizer o200k_base   # exact counts for GPT-4o
    python benchmarks/run_benchmark.py --output results.json    # save to file
    python benchmarks/run_benchmark.py --iterations 20          # average over 20 runs
"""

from __future__ import annotations

import argparse
import datetime
import json
import platform
import statistics
import sys
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path

# Ensure the src package is importable when running from repo root.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT / "src"))

from tksq import DictionaryLoader, LanguageDetector, PipelineConfig, compress  # noqa: E402
from tksq.types import LEVELS, TOKENIZERS, reduction_percent  # noqa: E402


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class LevelResult:
    """Benchmark result for a single (file, level) combination."""

    level: str
    original_chars: int
    compressed_chars: int
    original_tokens: int
    compressed_tokens: int
    token_savings_pct: float
    changes: int
    mean_time_ms: float
    median_time_ms: float
    min_time_ms: float
    max_time_ms: float


@dataclass(slots=True)
class FileResult:
    """Benchmark results for a single corpus file across all levels."""

    filename: str
    language: str
    original_chars: int
    levels: list[LevelResult] = field(default_factory=list)


@dataclass(slots=True)
class BenchmarkReport:
    """Full benchmark report."""

    timestamp: str
    python_version: str
    platform: str
    iterations: int
    domain: str
    language: str
    tokenizer: str
    files: list[FileResult] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

_SEP = "-" * 100
_HEADER_FMT = "  {:<11s} {:>9s} {:>9s} {:>9s} {:>9s} {:>8s} {:>8s} {:>10s} {:>10s}"
_ROW_FMT = "  {:<11s} {:>9,d} {:>9,d} {:>9,d} {:>9,d} {:>7.1f}% {:>8,d} {:>8.2f}ms {:>8.2f}ms"


def _print_table_header() -> None:
    print(_HEADER_FMT.format(
        "Level", "Orig ch", "Comp ch", "Orig tok", "Comp tok", "Tok sav", "Changes",
        "Mean(ms)", "Med(ms)",
    ))


def _print_table_row(r: LevelResult) -> None:
    print(_ROW_FMT.format(
        r.level,
        r.original_chars,
        r.compressed_chars,
        r.original_tokens,
        r.compressed_tokens,
        r.token_savings_pct,
        r.changes,
        r.mean_time_ms,
        r.median_time_ms,
    ))


# ---------------------------------------------------------------------------
# Core benchmark logic
# ---------------------------------------------------------------------------


def benchmark_text(
    text: str,
    *,
    iterations: int = 10,
    domain: str = "general",
    language: str = "en",
    tokenizer: str = "approximate",
) -> list[LevelResult]:
    """Run compression at all levels and return results."""
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    dictionary = DictionaryLoader.load(domain, language)
    results: list[LevelResult] = []

    for level in LEVELS:
        config = PipelineConfig(level=level, dictionary=dictionary, tokenizer=tokenizer)
        timings: list[float] = []
        result = None

        for _ in range(iterations):
            t0 = time.perf_counter()
            result = compress(text, config)
            t1 = time.perf_counter()
            timings.append((t1 - t0) * 1000)  # ms

        stats = result.stats
        results.append(LevelResult(
            level=level,
            original_chars=stats.original_chars,
            compressed_chars=stats.compressed_chars,
            original_tokens=stats.original_tokens,
            compressed_tokens=stats.compressed_tokens,
            token_savings_pct=stats.reduction_percent,
            changes=len(result.changes),
            mean_time_ms=statistics.mean(timings),
            median_time_ms=statistics.median(timings),
            min_time_ms=min(timings),
            max_time_ms=max(timings),
        ))

    return results


def run_benchmark(
    corpus_dir: Path,
    *,
    iterations: int = 10,
    domain: str = "general",
    language: str = "auto",
    tokenizer: str = "approximate",
    output_path: Path | None = None,
) -> BenchmarkReport:
    """Run the full benchmark over all corpus files."""
    report = BenchmarkReport(
        timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
        python_version=platform.python_version(),
        platform=platform.platform(),
        iterations=iterations,
        domain=domain,
        language=language,
        tokenizer=tokenizer,
    )

    corpus_files = sorted(corpus_dir.glob("*.txt"))
    if not corpus_files:
        print(f"No .txt files found in {corpus_dir}")
        sys.exit(1)

    print("\ntksq benchmark")
    print(f"Python {platform.python_version()} on {platform.platform()}")
    print(f"Iterations per level: {iterations}")
    print(f"Domain: {domain} | Language: {language} | Tokenizer: {tokenizer}")
    print(_SEP)

    for fp in corpus_files:
        text = fp.read_text(encoding="utf-8")
        file_language = LanguageDetector.detect(text) if language == "auto" else language

        print(f"\n  File: {fp.name} ({len(text):,d} chars, {file_language})")
        _print_table_header()

        level_results = benchmark_text(
            text,
            iterations=iterations,
            domain=domain,
            language=file_language,
            tokenizer=tokenizer,
        )
        report.files.append(FileResult(
            filename=fp.name,
            language=file_language,
            original_chars=len(text),
            levels=level_results,
        ))

        for lr in level_results:
            _print_table_row(lr)

    # Summary across all files
    print(f"\n{_SEP}")
    print("  AGGREGATE SUMMARY")
    print(_SEP)
    _print_table_header()

    for level in LEVELS:
        rows = [lr for fr in report.files for lr in fr.levels if lr.level == level]
        orig_tokens = sum(lr.original_tokens for lr in rows)
        comp_tokens = sum(lr.compressed_tokens for lr in rows)
        _print_table_row(LevelResult(
            level=level,
            original_chars=sum(lr.original_chars for lr in rows),
            compressed_chars=sum(lr.compressed_chars for lr in rows),
            original_tokens=orig_tokens,
            compressed_tokens=comp_tokens,
            token_savings_pct=reduction_percent(orig_tokens, comp_tokens),
            changes=sum(lr.changes for lr in rows),
            mean_time_ms=statistics.mean(lr.mean_time_ms for lr in rows),
            median_time_ms=statistics.median(lr.median_time_ms for lr in rows),
            min_time_ms=0.0,
            max_time_ms=0.0,
        ))

    print()

    # Optionally write JSON
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(asdict(report), indent=2), encoding="utf-8")
        print(f"  Results saved to {output_path}")
        print()

    return report


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark suite for tksq",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        default=Path(__file__).resolve().parent / "corpus",
        help="Directory with .txt corpus files (default: benchmarks/corpus/)",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=10,
        help="Number of iterations per (file, level) to average timing (default: 10)",
    )
    parser.add_argument(
        "--domain",
        choices=DictionaryLoader.available_domains(),
        default="general",
        help="Dictionary domain overlay (default: general)",
    )
    parser.add_argument(
        "--language",
        default="auto",
        help="Language pack code, or auto to detect per file (default: auto)",
    )
    parser.add_argument(
        "--tokenizer",
        choices=TOKENIZERS,
        default="approximate",
        help="Token counter; tiktoken encodings are downloaded on first use (default: approximate)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Path to save JSON results (e.g. benchmarks/results.json)",
    )
    args = parser.parse_args()

    try:
        run_benchmark(
            corpus_dir=args.corpus,
            iterations=args.iterations,
            domain=args.domain,
            language=args.language,
            tokenizer=args.tokenizer,
            output_path=args.output,
        )
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
