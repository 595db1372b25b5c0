"""
Tests for the requests-based API client.

The client is exercised against a fake session so no server is needed.
"""

import json
from datetime import date

import pytest
import requests

from habit_tracker_client import HabitTrackerAPI


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://test/api"
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Records requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


HABIT = {
    "id": 1,
    "name": "Read",
    "description": "Read 10 pages",
    "completed": False,
    "lastCompleted": None,
    "createdAt": "2025-09-01T09:30:00",
}


def make_client(*responses, **kwargs):
    session = FakeSession(*responses)
    return HabitTrackerAPI(base_url="http://test/", session=session, **kwargs), session


def test_list_habits():
    client, session = make_client(make_response(200, [HABIT]))

    habits, error = client.list_habits()

    assert error is None
    assert habits == [HABIT]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://test/api/Habits"


def test_custom_prefix():
    client, session = make_client(make_response(200, []), api_prefix="/v2/")
    client.list_habits()
    assert session.calls[0]["url"] == "http://test/v2/Habits"


def test_get_habit_not_found():
    client, _ = make_client(make_response(404, {"detail": "Habit 5 not found"}))

    habit, error = client.get_habit(5)

    assert habit is None
    assert error == {"status_code": 404, "message": "Habit 5 not found"}


def test_create_habit_sends_payload():
    client, session = make_client(make_response(201, HABIT))

    habit, error = client.create_habit({"name": "Read", "description": "Read 10 pages"})

    assert error is None
    assert habit["id"] == 1
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"name": "Read", "description": "Read 10 pages"}


def test_create_habit_conflict():
    client, _ = make_client(make_response(409, {"detail": "Habit with name 'Read' already exists"}))

    habit, error = client.create_habit({"name": "Read"})

    assert habit is None
    assert error["status_code"] == 409
    assert "already exists" in error["message"]


def test_update_habit():
    client, session = make_client(make_response(200, {**HABIT, "name": "Read more"}))

    habit, error = client.update_habit(1, {"name": "Read more"})

    assert error is None
    assert habit["name"] == "Read more"
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://test/api/Habits/1"


def test_delete_habit():
    client, session = make_client(make_response(204), make_response(404, {"detail": "Habit 1 not found"}))

    assert client.delete_habit(1) == (True, None)
    ok, error = client.delete_habit(1)
    assert ok is False
    assert error["status_code"] == 404
    assert session.calls[0]["method"] == "DELETE"


def test_search_habits_passes_query():
    client, session = make_client(make_response(200, [HABIT]))

    habits, error = client.search_habits("rea")

    assert error is None
    assert habits == [HABIT]
    assert session.calls[0]["url"] == "http://test/api/Habits/search"
    assert session.calls[0]["params"] == {"name": "rea"}


def test_complete_today_puts_last_completed():
    completed = {**HABIT, "completed": True, "lastCompleted": "2025-09-01"}
    client, session = make_client(make_response(200, HABIT), make_response(200, completed))

    habit, error = client.complete_today(1, today=date(2025, 9, 1))

    assert error is None
    assert habit["completed"] is True
    put = session.calls[1]
    assert put["method"] == "PUT"
    assert put["json"] == {
        "name": "Read",
        "description": "Read 10 pages",
        "completed": True,
        "lastCompleted": "2025-09-01",
    }


def test_complete_today_missing_habit():
    client, session = make_client(make_response(404, {"detail": "Habit 9 not found"}))

    habit, error = client.complete_today(9)

    assert habit is None
    assert error["status_code"] == 404
    assert len(session.calls) == 1


def test_non_json_error_body():
    response = make_response(500)
    response._content = b"Internal Server Error"
    client, _ = make_client(response)

    habits, error = client.list_habits()

    assert habits == []
    assert error == {"status_code": 500, "message": "Internal Server Error"}


@pytest.mark.parametrize(
    "exc", [requests.ConnectionError("connection refused"), requests.Timeout("timed out")]
)
def test_transport_failure_is_reported(exc):
    client, _ = make_client(exc)

    habits, error = client.list_habits()

    assert habits == []
    assert error["status_code"] is None
    assert str(exc) in error["message"]
