"""Client for the Zona Ei programs/projects JSON API.

Every lookup is a single GET. The API answers ``null`` when nothing matches,
which is surfaced here as ``None`` (or an empty list for stage listings).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from zonaei import config

log = logging.getLogger(__name__)

# Program slot values are "Tec Lean X"; the API stores the stage as "X"
PROGRAM_PREFIX = "Tec Lean "


class ProgramsApiError(Exception):
    """Raised when the programs API cannot be reached or answers with an error."""


def stage_for_program(program_name: str) -> str:
    return program_name.replace(PROGRAM_PREFIX, "")


class ProgramsClient:
    """Thin wrapper over :class:`httpx.Client` for the three lookups we need."""

    def __init__(
        self,
        base_url: str = config.API_URL,
        timeout: float = config.API_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def _get(self, path: str, **params: str) -> Any:
        log.info("GET %s %s", path, params)
        try:
            response = self._http.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            raise ProgramsApiError(f"GET {path} failed: {exc}") from exc
        except ValueError as exc:
            raise ProgramsApiError(f"GET {path} returned invalid JSON") from exc

    def get_program(self, name: str) -> Optional[dict]:
        return self._get("/program/name", name=name)

    def get_project(self, name: str) -> Optional[dict]:
        return self._get("/project/name", name=name)

    def get_projects_by_stage(self, stage: str) -> list[dict]:
        return self._get("/project/stage", stage=stage) or []

    def close(self) -> None:
        self._http.close()
