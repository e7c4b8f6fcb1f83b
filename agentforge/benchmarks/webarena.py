"""Loader for WebArena benchmark tasks in JSON Lines form."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..benchmark import BenchmarkSuite, BenchmarkTask

_log = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def load_from_jsonl(jsonl: str) -> list[BenchmarkTask]:
    """Parse WebArena tasks, skipping blank and malformed lines.

    Each line looks like
    ``{"task_id": 0, "intent": "...", "eval": {"reference_answers": {"must_include": ["..."]}}}``.
    """
    tasks = []
    for index, raw in enumerate(jsonl.split("\n")):
        line = raw.strip()
        if not line:
            continue
        try:
            value = json.loads(line, parse_constant=_reject_constant)
        except ValueError as exc:
            _log.warning("Skipping malformed WebArena task (line %d): %s", index, exc)
            continue
        tasks.append(_parse_task(value, index))
    return tasks


def _first_required_answer(data: dict[str, Any]) -> str | None:
    node: Any = data
    for key in ("eval", "reference_answers", "must_include"):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if isinstance(node, list) and node and isinstance(node[0], str):
        return node[0]
    return None


def _parse_task(value: Any, index: int) -> BenchmarkTask:
    data = value if isinstance(value, dict) else {}

    number = data.get("task_id")
    if isinstance(number, int) and not isinstance(number, bool) and number >= 0:
        task_id = f"webarena-{number}"
    else:
        task_id = f"webarena-{index}"

    question = data.get("intent")
    start_url = data.get("start_url")

    return BenchmarkTask(
        id=task_id,
        suite=BenchmarkSuite.WEB_ARENA,
        question=question if isinstance(question, str) else "",
        difficulty_level=None,
        expected_answer=_first_required_answer(data),
        context_files=[start_url] if isinstance(start_url, str) else [],
    )