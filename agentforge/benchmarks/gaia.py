"""Loader for GAIA benchmark tasks in JSON Lines form."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from ..benchmark import BenchmarkSuite, BenchmarkTask

_log = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def load_from_jsonl(jsonl: str) -> list[BenchmarkTask]:
    """Parse GAIA tasks, skipping blank and malformed lines.

    Each line looks like
    ``{"task_id": "...", "Question": "...", "Final answer": "...", "Level": 1}``.
    """
    tasks = []
    for index, raw in enumerate(jsonl.split("\n")):
        line = raw.strip()
        if not line:
            continue
        try:
            value = json.loads(line, parse_constant=_reject_constant)
        except ValueError as exc:
            _log.warning("Skipping malformed GAIA task (line %d): %s", index, exc)
            continue
        tasks.append(_parse_task(value, index))
    return tasks


def _parse_task(value: Any, index: int) -> BenchmarkTask:
    data = value if isinstance(value, dict) else {}

    task_id = data.get("task_id")
    question = data.get("Question")
    answer = data.get("Final answer")
    level = data.get("Level")

    difficulty = None
    if isinstance(level, int) and not isinstance(level, bool) and level >= 0:
        difficulty = level % 256

    return BenchmarkTask(
        id=task_id if isinstance(task_id, str) else f"gaia-{index}",
        suite=BenchmarkSuite.GAIA,
        question=question if isinstance(question, str) else "",
        difficulty_level=difficulty,
        expected_answer=answer if isinstance(answer, str) else None,
        context_files=[],
    )


def _readable_lines(reader: Iterable[str]) -> Iterable[str]:
    try:
        for line in reader:
            yield line.rstrip("\n").rstrip("\r")
    except (OSError, UnicodeDecodeError):
        return


def load_from_reader(reader: Iterable[str]) -> list[BenchmarkTask]:
    """Load GAIA tasks from a text stream, stopping at the first read error."""
    return load_from_jsonl("\n".join(_readable_lines(reader)))