# agentforge

Building blocks for evaluating AI agents: typed data models for agent
definitions, scenarios, traces, scorecards and benchmark runs, plus loaders
for public benchmark task files and helpers for scoring and comparison.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

- `agentforge.agent`: `AgentFile`, `ModelConfig`, `ToolDefinition`,
  `EvalHints`, `AgentVersion`, and the `AgentFileFormat` and `ModelProvider`
  enums.
- `agentforge.evaluation`: `EvalRun`, `DimensionScores`, `EvalWeights`,
  `Scorecard`, `FailureCluster` and related types. Use
  `DimensionScores.weighted_aggregate` to compute a weighted score.
  Use `EvalRun.to_scorecard` to build a scorecard from a finished run.
- `agentforge.scenario` and `agentforge.trace`: test scenarios and
  execution traces. `step_to_dict` and `step_from_dict` convert trace steps
  to and from tagged dictionaries.
- `agentforge.benchmark`: benchmark suites, tasks, results and
  `published_baselines()`.
- `agentforge.benchmarks.gaia`, `agentforge.benchmarks.agentbench` and
  `agentforge.benchmarks.webarena`: `load_from_jsonl` reads benchmark tasks
  from JSON-lines text and skips lines that are not valid JSON.
- `agentforge.benchmarks.normalizer`: `to_scenarios`, `percentile_rank` and
  `assess_result`.
- `agentforge.multiagent`: `AgentGraph`, whose `topological_order` method
  orders its nodes and raises an error on a cycle.
- `agentforge.finetune`, `agentforge.redteam`, `agentforge.shadow` and
  `agentforge.cost`: fine-tune export, red-team, shadow-run and cost models.
- `agentforge.errors`: the `AgentForgeError` hierarchy.
- `agentforge.api_errors`: `ApiError`, which maps errors to HTTP-style JSON
  responses.
- `agentforge.diff`: `compute_diff`, which compares two agent versions.

## Example

```python
from agentforge.benchmarks import gaia
from agentforge.benchmarks.normalizer import assess_result, percentile_rank

tasks = gaia.load_from_jsonl(
    '{"task_id": "g1", "Question": "What is 2+2?", "Final answer": "4", "Level": 1}'
)
result = assess_result(tasks[0], "The answer is 4.")
print(result.correct)  # True
print(percentile_rank(tasks[0].suite, 0.6))  # 100.0
```