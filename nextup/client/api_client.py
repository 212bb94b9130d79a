# nextup/client/api_client.py
from typing import Any, Dict, List, Optional
import requests

from nextup.core.logging import logger


class ApiError(Exception):
    """An error response from the NextUp API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class NextUpClient:
    """
    Thin client for the NextUp HTTP API.

    Stores the bearer token returned by register/login and sends it on
    every later request. Errors are raised as ApiError, never retried.
    """

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = self.session.request(
            method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
        )
        if not response.ok:
            try:
                message = response.json().get("message", response.text)
            except ValueError:
                message = response.text
            logger.warning(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, message)
        return response

    def _authenticate(self, path: str, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", path, json={"email": email, "password": password}).json()
        self.token = data["token"]
        return data["user"]

    def register(self, email: str, password: str) -> Dict[str, Any]:
        return self._authenticate("/api/auth/register", email, password)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._authenticate("/api/auth/login", email, password)

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/api/me").json()

    def list_teams(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/teams").json()["teams"]

    def create_team(self, name: str, members: Optional[List[str]] = None, topic: Optional[str] = None) -> Dict[str, Any]:
        payload = {"name": name, "members": members or [], "topic": topic}
        return self._request("POST", "/api/teams", json=payload).json()["team"]

    def delete_team(self, team_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/teams/{team_id}").json()["team"]

    def reset_teams(self) -> None:
        self._request("POST", "/api/teams/reset")

    def save_notes(self, team_id: int, notes: str) -> Dict[str, Any]:
        return self._request("POST", f"/api/teams/{team_id}/notes", json={"notes": notes}).json()["team"]

    def status(self) -> Dict[str, Any]:
        return self._request("GET", "/api/status").json()

    def randomize(self) -> Dict[str, Any]:
        return self._request("POST", "/api/randomize").json()

    def reset_round(self) -> int:
        return self._request("POST", "/api/reset").json()["remainingCount"]

    def record_presentation(self, team_id: int, presentation_seconds: int, qa_seconds: int) -> Dict[str, Any]:
        payload = {"presentationSeconds": presentation_seconds, "qaSeconds": qa_seconds}
        return self._request("POST", f"/api/teams/{team_id}/presentation", json=payload).json()["presentation"]

    def list_presentations(self, team_id: int) -> List[Dict[str, Any]]:
        return self._request("GET", f"/api/teams/{team_id}/presentations").json()["presentations"]

    def export(self, format: str = "json") -> bytes:
        return self._request("GET", "/api/export", params={"format": format}).content

    def recorder_for(self, team_id: int):
        """Recorder callable for PresentationTimer bound to one team."""
        def record(presentation_seconds: int, qa_seconds: int) -> None:
            self.record_presentation(team_id, presentation_seconds, qa_seconds)
        return record
