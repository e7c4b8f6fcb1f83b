"""Loader for AgentBench benchmark tasks in JSON Lines form."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..benchmark import BenchmarkSuite, BenchmarkTask

_log = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number: {name}")


def load_from_jsonl(jsonl: str) -> list[BenchmarkTask]:
    """Parse AgentBench tasks, skipping blank and malformed lines.

    Each line looks like ``{"id": "...", "task": "...", "answer": "...", "env": "os"}``.
    """
    tasks = []
    for index, raw in enumerate(jsonl.split("\n")):
        line = raw.strip()
        if not line:
            continue
        try:
            value = json.loads(line, parse_constant=_reject_constant)
        except ValueError as exc:
            _log.warning("Skipping malformed AgentBench task (line %d): %s", index, exc)
            continue
        tasks.append(_parse_task(value, index))
    return tasks


def _parse_task(value: Any, index: int) -> BenchmarkTask:
    data = value if isinstance(value, dict) else {}

    task_id = data.get("id")
    question = data.get("task")
    answer = data.get("answer")

    return BenchmarkTask(
        id=task_id if isinstance(task_id, str) else f"agentbench-{index}",
        suite=BenchmarkSuite.AGENT_BENCH,
        question=question if isinstance(question, str) else "",
        difficulty_level=None,
        expected_answer=answer if isinstance(answer, str) else None,
        context_files=[],
    )