"""Shared fixtures."""

import json
from pathlib import Path

import pytest
import requests

from dtview.models import Project
from dtview.services import sample_document


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records GET calls and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def sample_project() -> Project:
    return Project.from_raw(sample_document())


@pytest.fixture
def two_asset_project() -> Project:
    return Project.from_raw({
        "projectId": "p1",
        "projectName": "Two assets",
        "tasks": [
            {
                "taskId": "t1",
                "taskName": "Watch and read",
                "assets": [
                    {"assetId": "x1", "title": "Clip", "type": "video", "url": "https://cdn.test/clip.mp4"},
                    {"assetId": "x2", "title": "Notes", "type": "article", "description": "Read me"},
                ],
            },
            {"taskId": "t2", "taskName": "Empty", "assets": []},
        ],
    })


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(sample_document()), encoding="utf-8")
    return path
