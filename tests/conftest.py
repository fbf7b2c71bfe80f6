"""Shared fixtures."""

import json

import pytest

from benchdelta.results import ResultSet

REMOTE_DATA = {
    "benchmarks": {
        "render-list": {
            "averages": [
                {"entry": "mount", "mean": 100.0, "sem": 0.0},
                {"entry": "update", "mean": 100.0, "sem": 0.0},
                {"entry": "unmount", "mean": 100.0, "sem": 5.0},
            ]
        },
        "parse-json": {
            "averages": [
                {"entry": "small", "mean": 12.5, "sem": 0.2},
            ]
        },
    }
}

LOCAL_DATA = {
    "benchmarks": {
        "render-list": {
            "averages": [
                {"entry": "mount", "mean": 90.0, "sem": 0.0},
                {"entry": "update", "mean": 110.0, "sem": 0.0},
                {"entry": "unmount", "mean": 101.0, "sem": 5.0},
            ]
        },
        "parse-json": {
            "averages": [
                {"entry": "small", "mean": 12.5, "sem": 0.2},
                {"entry": "large", "mean": 240.0, "sem": 3.0},
            ]
        },
    }
}


@pytest.fixture
def remote() -> ResultSet:
    return ResultSet.from_dict(REMOTE_DATA)


@pytest.fixture
def local() -> ResultSet:
    return ResultSet.from_dict(LOCAL_DATA)


@pytest.fixture
def result_files(tmp_path):
    """Write remote and local results to disk."""
    remote_path = tmp_path / "remote.json"
    local_path = tmp_path / "local.json"
    remote_path.write_text(json.dumps(REMOTE_DATA))
    local_path.write_text(json.dumps(LOCAL_DATA))
    return remote_path, local_path
