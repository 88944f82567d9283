"""Command-line entry point: python -m palabras FILE."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from ._analyzer import WordAnalyzer
from ._config import AnalyzerConfig
from ._errors import PalabrasError
from ._pool import EXECUTORS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import AnalysisResult


def format_result(result: AnalysisResult) -> str:
    """Ranked table with a short summary header."""
    lines = [
        f"File size: {result.formatted_file_size}",
        f"Total words: {result.total_words}",
        f"Unique words: {result.unique_words}",
        f"Time: {result.total_time_ms} ms "
        f"({result.words_per_second:.0f} words/s, {result.workers} chunks)",
    ]
    if not result.complete:
        lines.append(f"Incomplete chunks: {list(result.failed_chunks)}")
    if not result.top_words:
        return "\n".join(lines)

    width = max(4, max(len(wf.word) for wf in result.top_words))
    count_width = max(5, len(str(result.top_words[0].count)))
    lines.append("")
    header = f"{'#':>4}  {'Word':<{width}}  {'Count':>{count_width}}"
    lines.append(header)
    lines.append("-" * len(header))
    for rank, wf in enumerate(result.top_words, 1):
        lines.append(f"{rank:>4}  {wf.word:<{width}}  {wf.count:>{count_width}}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="palabras",
        description="Parallel word-frequency analysis of a text file.",
    )
    parser.add_argument("file", help="Path to the text file")
    parser.add_argument("--workers", "-w", type=int, help="Number of chunks")
    parser.add_argument("--top", "-n", type=int, help="How many words to rank")
    parser.add_argument("--min-length", type=int, help="Minimum word length")
    parser.add_argument("--executor", choices=EXECUTORS, help="Pool kind")
    parser.add_argument("--json", action="store_true", help="Print JSON")
    parser.add_argument("--verbose", "-v", action="count", default=0)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        env = AnalyzerConfig.from_env()
        config = AnalyzerConfig(
            workers=args.workers if args.workers is not None else env.workers,
            top_k=args.top if args.top is not None else env.top_k,
            min_length=(
                args.min_length if args.min_length is not None else env.min_length
            ),
            executor=args.executor or env.executor,
        )
        result = WordAnalyzer(config).analyze(args.file)
    except PalabrasError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
