import json
from pathlib import Path

import pytest

from ngramtrace import BigramTracer, TrigramTracer, load_struct_logs, replay
from ngramtrace.replay import extract_struct_logs
from ngramtrace.steplog import TraceFormatError


def struct_logs(*steps):
    entries = []
    for pc, step in enumerate(steps):
        op, depth = step[0], step[1]
        entry = {"pc": pc, "op": op, "gas": 1000 - pc, "gasCost": 3, "depth": depth}
        if len(step) > 2:
            entry["error"] = step[2]
        entries.append(entry)
    return entries


def test_extract_accepts_all_document_shapes():
    entries = struct_logs(("PUSH1", 1), ("STOP", 1))
    shapes = [
        entries,
        {"gas": 21000, "failed": False, "returnValue": "", "structLogs": entries},
        {"jsonrpc": "2.0", "id": 1, "result": {"structLogs": entries}},
    ]
    for document in shapes:
        assert [log.opcode() for log in extract_struct_logs(document)] == ["PUSH1", "STOP"]


@pytest.mark.parametrize("document", [{"gas": 1}, {"result": "0x"}, "PUSH1", 42])
def test_extract_rejects_unknown_documents(document):
    with pytest.raises(TraceFormatError):
        extract_struct_logs(document)


def test_faulted_entries_are_routed_to_on_fault():
    logs = extract_struct_logs(
        struct_logs(("PUSH1", 0), ("INVALID", 0, "invalid opcode: INVALID"), ("PUSH1", 0), ("ADD", 0))
    )
    summary = replay(logs, BigramTracer())
    assert (summary.steps, summary.faults, summary.events) == (3, 1, 4)
    assert summary.histogram == {"-PUSH1": 1, "PUSH1-PUSH1": 1, "PUSH1-ADD": 1}


def test_replay_of_nested_call_with_trigrams():
    logs = extract_struct_logs(
        struct_logs(
            ("PUSH1", 1),
            ("CALL", 1),
            ("PUSH1", 2),
            ("PUSH1", 2),
            ("RETURN", 2),
            ("POP", 1),
            ("STOP", 1),
        )
    )
    summary = replay(logs, TrigramTracer())
    assert summary.histogram == {
        "--CALL": 1,
        "--PUSH1": 1,
        "-PUSH1-RETURN": 1,
        "--STOP": 1,
    }


def test_load_struct_logs_from_file(tmp_path: Path):
    path = tmp_path / "trace.json"
    path.write_text(json.dumps({"structLogs": struct_logs(("A", 1), ("B", 1))}), "utf-8")
    assert [log.depth() for log in load_struct_logs(path)] == [1, 1]


def test_load_rejects_invalid_json(tmp_path: Path):
    path = tmp_path / "trace.json"
    path.write_text("{not json", "utf-8")
    with pytest.raises(TraceFormatError, match="not valid JSON"):
        load_struct_logs(path)


def test_empty_trace_logs_warning(tmp_path: Path, caplog):
    path = tmp_path / "trace.json"
    path.write_text("[]", "utf-8")
    assert load_struct_logs(path) == []
    assert "contains no step entries" in caplog.text
