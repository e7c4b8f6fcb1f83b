from agentforge.benchmark import BenchmarkSuite
from agentforge.benchmarks.webarena import load_from_jsonl


def test_parse_valid_webarena_task():
    jsonl = (
        '{"task_id":1,"intent":"Find the price of item X",'
        '"eval":{"reference_answers":{"must_include":["$29.99"]}}}'
    )
    tasks = load_from_jsonl(jsonl)
    assert len(tasks) == 1
    assert tasks[0].expected_answer == "$29.99"
    assert tasks[0].id == "webarena-1"
    assert tasks[0].question == "Find the price of item X"
    assert tasks[0].suite is BenchmarkSuite.WEB_ARENA


def test_string_task_id_falls_back_to_index():
    jsonl = '\n\n{"task_id":"abc","intent":"x"}'
    assert load_from_jsonl(jsonl)[0].id == "webarena-2"


def test_start_url_becomes_context_file():
    task = load_from_jsonl('{"task_id":3,"start_url":"http://localhost:7770"}')[0]
    assert task.context_files == ["http://localhost:7770"]


def test_missing_start_url_gives_no_context():
    task = load_from_jsonl('{"task_id":3}')[0]
    assert task.context_files == []


def test_missing_reference_answer_is_none():
    jsonl = '{"task_id":4,"eval":{"reference_answers":{"must_include":[]}}}'
    assert load_from_jsonl(jsonl)[0].expected_answer is None


def test_non_string_reference_answer_is_none():
    jsonl = '{"task_id":5,"eval":{"reference_answers":{"must_include":[42]}}}'
    assert load_from_jsonl(jsonl)[0].expected_answer is None


def test_malformed_line_skipped():
    jsonl = 'oops\n{"task_id":7}'
    assert [t.id for t in load_from_jsonl(jsonl)] == ["webarena-7"]