"""Tests for decoding the organisation repo listing."""
import pytest

from conftest import payload, repo_json
from orgrepos.decoder import DecodeReport, decode_repositories
from orgrepos.errors import ErrorKind, NetworkError


def test_decodes_every_valid_element_in_order():
    items = [repo_json(id=i, name=f"repo-{i}") for i in range(5)]

    report = decode_repositories(payload(items))

    assert len(report) == 5
    assert report.skipped == 0
    assert [r.id for r in report] == [0, 1, 2, 3, 4]
    assert [r.name for r in report] == [f"repo-{i}" for i in range(5)]


def test_invalid_elements_are_dropped_and_counted():
    broken = repo_json(id=2)
    del broken["created_at"]
    items = [
        repo_json(id=1),
        broken,
        repo_json(id=3, stargazers_count="many"),
        "not-an-object",
        repo_json(id=5),
    ]

    report = decode_repositories(payload(items))

    assert [r.id for r in report] == [1, 5]
    assert report.skipped == 3


def test_empty_array_is_not_an_error():
    report = decode_repositories(b"[]")

    assert report == DecodeReport()
    assert len(report) == 0
    assert report.skipped == 0


@pytest.mark.parametrize("data", [b"", b"{not json", b"\xff\xfe"])
def test_unparseable_payload_raises(data):
    with pytest.raises(NetworkError) as exc:
        decode_repositories(data)

    assert exc.value.kind is ErrorKind.COULD_NOT_PARSE_JSON


def test_top_level_object_raises():
    with pytest.raises(NetworkError) as exc:
        decode_repositories(b'{"message": "Not Found"}')

    assert exc.value.kind is ErrorKind.COULD_NOT_PARSE_JSON
    assert "dict" in str(exc.value)


def test_deeply_nested_payload_raises_parse_error():
    depth = 200_000

    with pytest.raises(NetworkError) as exc:
        decode_repositories(b"[" * depth + b"]" * depth)

    assert exc.value.kind is ErrorKind.COULD_NOT_PARSE_JSON
