"""Habit tracker API client.

This module defines a small client wrapper around the Habit Tracker
REST API.  It uses the ``requests`` library internally and exposes
high-level methods for every operation the service offers:

* :meth:`list_habits` – return all habits ordered by id.
* :meth:`get_habit` – fetch a single habit by its identifier.
* :meth:`create_habit` – create a new habit.
* :meth:`update_habit` – replace the mutable fields of a habit.
* :meth:`delete_habit` – remove a habit.
* :meth:`search_habits` – case-insensitive substring search by name.
* :meth:`complete_today` – mark a habit as done today.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  Network problems are
reported the same way rather than raised, so callers such as bots or
scripts can handle all failures in one place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """A single API operation.

    Attributes:
        path: The URI template relative to the API prefix, e.g.
            ``/Habits`` or ``/Habits/{id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
    """

    path: str
    method: str

    def format(self, habit_id: Any = None) -> str:
        if habit_id is None:
            return self.path
        return self.path.replace("{id}", str(habit_id))


class HabitTrackerAPI:
    """Client for interacting with the Habit Tracker API."""

    ENDPOINTS: Dict[str, ApiEndpoint] = {
        "list": ApiEndpoint(path="/Habits", method="GET"),
        "search": ApiEndpoint(path="/Habits/search", method="GET"),
        "get": ApiEndpoint(path="/Habits/{id}", method="GET"),
        "create": ApiEndpoint(path="/Habits", method="POST"),
        "update": ApiEndpoint(path="/Habits/{id}", method="PUT"),
        "delete": ApiEndpoint(path="/Habits/{id}", method="DELETE"),
    }

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the habit routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/Habits``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty bodies such as 204 replies.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(
        self, operation: str, habit_id: Any = None, **kwargs: Any
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self.ENDPOINTS[operation]
        return self._request(ep.method, ep.format(habit_id), **kwargs)

    # ------------------------------------------------------------------
    # Habit operations
    # ------------------------------------------------------------------
    def list_habits(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all habits, ordered by id."""
        data, error = self._call("list")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_habit(self, habit_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single habit by ID."""
        return self._call("get", habit_id)

    def create_habit(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a habit.

        Args:
            payload: Habit fields; ``name`` is required, ``description``
                and ``completed`` are optional.
        Returns:
            A tuple ``(habit, error)``.  A duplicate name yields an
            error with ``status_code`` 409.
        """
        return self._call("create", json_body=payload)

    def update_habit(self, habit_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name, description and completion state of a habit."""
        return self._call("update", habit_id, json_body=payload)

    def delete_habit(self, habit_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a habit.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._call("delete", habit_id)
        if error:
            return False, error
        return True, None

    def search_habits(self, name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return habits whose name contains ``name`` (case-insensitive)."""
        data, error = self._call("search", params={"name": name})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def complete_today(self, habit_id: Any, today: Optional[date] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Mark a habit as completed today.

        Fetches the habit and sends it back with ``lastCompleted`` set
        to ``today``; the service then reports it as completed.

        Args:
            habit_id: Identifier of the habit.
            today: Date to record; defaults to the local current date.
        Returns:
            A tuple ``(habit, error)`` with the updated habit.
        """
        habit, error = self.get_habit(habit_id)
        if error:
            return None, error
        payload = {
            "name": habit.get("name"),
            "description": habit.get("description"),
            "completed": True,
            "lastCompleted": (today or date.today()).isoformat(),
        }
        return self.update_habit(habit_id, payload)
