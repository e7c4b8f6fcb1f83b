import io

from agentforge.benchmark import BenchmarkSuite
from agentforge.benchmarks.gaia import load_from_jsonl, load_from_reader


def test_parse_valid_gaia_task():
    jsonl = '{"task_id":"g1","Question":"What is 2+2?","Final answer":"4","Level":1}'
    tasks = load_from_jsonl(jsonl)
    assert len(tasks) == 1
    assert tasks[0].id == "g1"
    assert tasks[0].expected_answer == "4"
    assert tasks[0].difficulty_level == 1
    assert tasks[0].question == "What is 2+2?"
    assert tasks[0].suite is BenchmarkSuite.GAIA


def test_skip_malformed_lines():
    jsonl = 'not-json\n{"task_id":"g2","Question":"Q","Final answer":"A"}'
    tasks = load_from_jsonl(jsonl)
    assert len(tasks) == 1
    assert tasks[0].id == "g2"


def test_missing_id_uses_line_index():
    jsonl = '\n{"Question":"Q"}'
    tasks = load_from_jsonl(jsonl)
    assert [t.id for t in tasks] == ["gaia-1"]


def test_missing_fields_default():
    task = load_from_jsonl('{"task_id":"x"}')[0]
    assert task.question == ""
    assert task.expected_answer is None
    assert task.difficulty_level is None
    assert task.context_files == []


def test_non_string_answer_is_none():
    task = load_from_jsonl('{"task_id":"x","Final answer":4}')[0]
    assert task.expected_answer is None


def test_blank_lines_skipped():
    jsonl = '\n   \n{"task_id":"a"}\n\n{"task_id":"b"}\n'
    assert [t.id for t in load_from_jsonl(jsonl)] == ["a", "b"]


def test_non_integer_level_ignored():
    task = load_from_jsonl('{"task_id":"x","Level":"2"}')[0]
    assert task.difficulty_level is None


def test_load_from_reader():
    stream = io.StringIO('{"task_id":"r1","Question":"Q1"}\n{"task_id":"r2","Question":"Q2"}\n')
    tasks = load_from_reader(stream)
    assert [t.id for t in tasks] == ["r1", "r2"]
    assert tasks[1].question == "Q2"