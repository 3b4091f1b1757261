"""Run an annotator over file patterns and print per-file results.

Flow: expand patterns -> load files -> plan batches -> send -> render.
Per-pattern, per-file and per-batch failures are logged and skipped;
the run always completes.
"""

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from core.errors import BackendError, LoadError, PatternInvalid
from core.file_discovery import expand_pattern
from core.loader import load_file
from core.types import LoadedFile, RunSummary

from .base import Annotator

logger = logging.getLogger(__name__)


def iter_filenames(patterns: Iterable[str]) -> Iterator[str]:
    """Yield matches for each pattern in order, skipping invalid patterns."""
    for pattern in patterns:
        try:
            matches = expand_pattern(pattern)
        except PatternInvalid as e:
            logger.error(str(e))
            continue
        if not matches:
            logger.warning(f"No files match {pattern}")
        yield from matches


def iter_loaded(filenames: Iterable[str], summary: RunSummary) -> Iterator[LoadedFile]:
    """Load files lazily, logging and counting the ones that fail."""
    for filename in filenames:
        try:
            yield load_file(filename)
        except LoadError as e:
            logger.error(str(e))
            summary.skipped += 1


def run(annotator: Annotator, patterns: Iterable[str], out: TextIO | None = None) -> RunSummary:
    """Annotate every file matched by patterns.

    Args:
        annotator: Provider backend chosen at startup.
        patterns: Glob patterns, processed in order.
        out: Stream for result lines (default: sys.stdout).

    Returns:
        RunSummary with printed, failed and skipped counts.
    """
    out = out or sys.stdout
    summary = RunSummary()
    loaded_files = iter_loaded(iter_filenames(patterns), summary)

    for batch in annotator.plan(loaded_files):
        try:
            responses = annotator.send(batch)
        except BackendError as e:
            logger.error(str(e))
            summary.failed += len(batch)
            continue

        for loaded, response in zip(batch.files, responses):
            try:
                text = annotator.render(loaded, response)
            except BackendError as e:
                logger.error(str(e))
                summary.failed += 1
                continue
            print(f"{loaded.filename}: {text}", file=out)
            summary.printed += 1

    return summary
