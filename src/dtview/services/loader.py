"""Project acquisition with fallback to the bundled sample."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import requests
import yaml

from ..config import config
from ..models import Project
from .normalize import normalize, recover_single_task
from .sample import sample_document

logger = logging.getLogger(__name__)

_UNSET = object()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


class ProjectSource(str, Enum):
    """Where a loaded project came from."""

    REMOTE = "remote"
    FILE = "file"
    FALLBACK = "fallback"


@dataclass
class LoadResult:
    """Outcome of a project load."""

    project: Project
    source: ProjectSource
    location: Optional[str] = None
    error_message: Optional[str] = None
    loaded_at: Optional[datetime] = None

    @property
    def used_fallback(self) -> bool:
        return self.source == ProjectSource.FALLBACK


def is_remote(location: str) -> bool:
    """Whether a source location is an HTTP(S) URL."""
    return location.lower().startswith(("http://", "https://"))


class ProjectLoader:
    """Loads a project document and never fails outward.

    Network errors, non-success statuses, unparsable bodies and documents
    that are not JSON objects are logged as warnings and replaced with the
    bundled sample project.
    """

    def __init__(
        self,
        source: Optional[str] = None,
        timeout: Any = _UNSET,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the loader.

        Args:
            source: Remote URL or local JSON/YAML path. Defaults to
                DTVIEW_REMOTE_URL.
            timeout: Seconds to wait for the remote document, None for no
                limit. Defaults to DTVIEW_FETCH_TIMEOUT.
            session: Optional requests session used for the fetch.
        """
        self._source = source or config.remote_url
        self._timeout = config.timeout if timeout is _UNSET else timeout
        self._session = session

    @property
    def source(self) -> str:
        """Return the configured source location."""
        return self._source

    def load(self) -> Project:
        """Return the project, or the sample project on any failure."""
        return self.load_result().project

    def load_result(self) -> LoadResult:
        """Load the project and report where it came from."""
        kind = ProjectSource.REMOTE if is_remote(self._source) else ProjectSource.FILE

        try:
            raw = self._fetch() if kind == ProjectSource.REMOTE else self._read_file()
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Expected a JSON object, got {type(raw).__name__}"
                )
            project = self._build(normalize(raw))
        except (
            requests.RequestException,
            ValueError,
            RecursionError,
            OSError,
            yaml.YAMLError,
        ) as e:
            logger.warning(
                f"Could not load project from {self._source}, using sample data. Error: {e}"
            )
            return LoadResult(
                project=self._build(sample_document()),
                source=ProjectSource.FALLBACK,
                location=self._source,
                error_message=str(e),
                loaded_at=datetime.now(),
            )

        logger.info(
            f"Loaded project '{project.name}' with {len(project.tasks)} task(s) "
            f"from {self._source}"
        )
        return LoadResult(
            project=project,
            source=kind,
            location=self._source,
            loaded_at=datetime.now(),
        )

    def _build(self, doc: dict) -> Project:
        return Project.from_raw(recover_single_task(doc))

    def _fetch(self) -> Any:
        """Fetch and decode the remote document, bypassing caches."""
        logger.debug(f"Fetching project document: {self._source}")
        getter = self._session.get if self._session is not None else requests.get
        response = getter(self._source, headers=NO_CACHE_HEADERS, timeout=self._timeout)
        response.raise_for_status()
        return response.json()

    def _read_file(self) -> Any:
        """Read a local JSON or YAML document."""
        path = Path(self._source)
        logger.debug(f"Reading project document: {path}")
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)


def load_project(source: Optional[str] = None) -> Project:
    """Load a project from ``source`` (or the configured URL) with fallback."""
    return ProjectLoader(source).load()
