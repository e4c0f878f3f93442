import json

import pytest

from turbokit.client import (
    DocumentQueryResult,
    ProgramEvent,
    ProgramFile,
    QueryResult,
    build_query,
    query_result_from_response,
    split_program_path,
)
from turbokit.encoding import encode


def _file(contents=b"hello"):
    return ProgramFile(
        checksum="c2Vj",
        contents=contents,
        created_at=10,
        updated_at=20,
        prev_txn_hash=None,
        txn_hash="dHhu",
        version=3,
    )


def test_program_file_round_trip():
    original = _file(b"\x00\x01\xff")
    assert ProgramFile.from_json(original.to_json()) == original


def test_program_file_from_bytes():
    original = _file()
    assert ProgramFile.from_json(original.to_json().encode()) == original


def test_program_file_missing_prev_hash_is_none():
    obj = json.loads(_file().to_json())
    del obj["prev_txn_hash"]
    assert ProgramFile.from_json(json.dumps(obj)).prev_txn_hash is None


def test_program_file_contents_are_base64():
    obj = json.loads(_file(b"abc").to_json())
    assert obj["contents"] == encode(b"abc")


def test_program_file_rejects_bad_base64():
    obj = json.loads(_file().to_json())
    obj["contents"] = "!!!"
    with pytest.raises(ValueError):
        ProgramFile.from_json(json.dumps(obj))


def test_program_file_rejects_missing_field():
    obj = json.loads(_file().to_json())
    del obj["version"]
    with pytest.raises(ValueError):
        ProgramFile.from_json(json.dumps(obj))


def test_program_file_rejects_negative_timestamp():
    obj = json.loads(_file().to_json())
    obj["created_at"] = -1
    with pytest.raises(ValueError):
        ProgramFile.from_json(json.dumps(obj))


def test_program_event_type_field():
    raw = json.dumps(
        {
            "id": "e1",
            "created_at": 5,
            "program_id": "prog",
            "tx_hash": "h",
            "type": "transfer",
            "data": encode(b"xyz"),
        }
    )
    event = ProgramEvent.from_json(raw)
    assert event.kind == "transfer"
    assert event.data == b"xyz"
    assert json.loads(event.to_json())["type"] == "transfer"
    assert ProgramEvent.from_json(event.to_json()) == event


def test_build_query():
    assert build_query([("stream", "true")]) == "stream=true"
    assert build_query([]) == ""
    assert build_query({"a": 1, "b": 2}) == "a=1&b=2"


def test_split_program_path():
    assert split_program_path("prog/dir/file.bin") == ("prog", "dir/file.bin")
    assert split_program_path("prog") == ("prog", "")
    assert split_program_path("") == ("", "")


def test_failed_status_is_network_error():
    result = query_result_from_response(2, _file().to_json().encode(), b"", ProgramFile)
    assert result == QueryResult(loading=False, data=None, error="NetworkError")


def test_pending_without_data():
    result = query_result_from_response(1, b"", b"", ProgramFile)
    assert result.loading is True
    assert result.data is None
    assert result.error is None


def test_success_parses_data():
    original = _file()
    result = query_result_from_response(0, original.to_json().encode(), None, ProgramFile)
    assert result.data == original
    assert result.loading is False


def test_bad_json_sets_error():
    result = query_result_from_response(0, b"{not json", b"", ProgramFile)
    assert result.data is None
    assert isinstance(result.error, str) and result.error


def test_error_message_overrides():
    result = query_result_from_response(0, b"{bad", b"denied", ProgramFile)
    assert result.error == "denied"


def test_document_parse():
    doc = DocumentQueryResult("prog/doc", QueryResult(data=_file(b"state")))
    assert doc.parse(lambda raw: raw.decode()) == "state"
    assert doc.data() == _file(b"state")
    assert doc.loading() is False
    assert doc.error() is None
    assert str(doc.path) == "prog/doc"


def test_document_parse_without_data():
    doc = DocumentQueryResult("prog/doc", QueryResult(loading=True))
    assert doc.parse(bytes) is None
    assert doc.loading() is True


def test_document_parse_failure_is_none():
    doc = DocumentQueryResult("prog/doc", QueryResult(data=_file(b"\xff\xfe")))
    assert doc.parse(lambda raw: raw.decode("utf-8")) is None