import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from taskapp.errors import (
    NotFoundError,
    RequestFailedError,
    TransportError,
    ValidationError,
    describe_error,
)
from taskapp.services.api_client import DEFAULT_API_URL, TaskApiClient, resolve_api_url


def make_response(status_code, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


class ResolveApiUrlTestCase(unittest.TestCase):
    def test_explicit_url_wins(self):
        with patch.dict(os.environ, {"TASK_API_URL": "http://env:1"}):
            self.assertEqual(resolve_api_url("http://given:2/"), "http://given:2")

    def test_env_var(self):
        with patch.dict(os.environ, {"TASK_API_URL": "http://env:1/"}):
            self.assertEqual(resolve_api_url(), "http://env:1")

    def test_default(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_api_url(), DEFAULT_API_URL)


class TaskApiClientTestCase(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.client = TaskApiClient("http://api.test", timeout=3, session=self.session)

    def test_list_tasks(self):
        self.session.request.return_value = make_response(200, [{"id": "1", "title": "Mock Task"}])

        tasks = self.client.list_tasks()
        self.assertEqual(tasks[0]["title"], "Mock Task")
        self.session.request.assert_called_once_with("GET", "http://api.test/api/tasks", timeout=3)

    def test_create_task_sends_payload(self):
        self.session.request.return_value = make_response(201, {"id": "2", "title": "New Task"})

        task = self.client.create_task("New Task", description="d", priority="High")
        self.assertEqual(task["id"], "2")
        self.session.request.assert_called_once_with(
            "POST",
            "http://api.test/api/tasks",
            timeout=3,
            json={"title": "New Task", "description": "d", "priority": "High"},
        )

    def test_toggle_and_delete_paths(self):
        self.session.request.return_value = make_response(200, {"id": "3", "completed": True})
        self.client.toggle_task("3")
        self.session.request.assert_called_with("PUT", "http://api.test/api/tasks/3/toggle", timeout=3)

        self.session.request.return_value = make_response(200, {"message": "Task deleted successfully"})
        self.assertEqual(self.client.delete_task("3")["message"], "Task deleted successfully")
        self.session.request.assert_called_with("DELETE", "http://api.test/api/tasks/3", timeout=3)

    def test_not_found(self):
        self.session.request.return_value = make_response(404, {"message": "Task not found"})
        with self.assertRaises(NotFoundError) as ctx:
            self.client.get_task("99")
        self.assertEqual(ctx.exception.message, "Task not found")

    def test_validation_error_uses_server_message(self):
        self.session.request.return_value = make_response(400, {"message": "Task title is required"})
        with self.assertRaises(ValidationError) as ctx:
            self.client.create_task("")
        self.assertEqual(ctx.exception.message, "Task title is required")

    def test_server_error(self):
        self.session.request.return_value = make_response(500, text="boom")
        with self.assertRaises(RequestFailedError) as ctx:
            self.client.list_tasks()
        self.assertEqual(ctx.exception.status_code, 500)

    def test_connection_error_is_transport_error(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(TransportError):
            self.client.list_tasks()

    def test_timeout_is_transport_error(self):
        self.session.request.side_effect = requests.Timeout("slow")
        with self.assertRaises(TransportError):
            self.client.get_task("1")

    def test_non_json_success_body(self):
        response = make_response(200, text="<html>oops</html>")
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
        self.session.request.return_value = response
        with self.assertRaises(RequestFailedError) as ctx:
            self.client.list_tasks()
        self.assertEqual(ctx.exception.status_code, 200)

    def test_url_without_scheme_is_transport_error(self):
        client = TaskApiClient("localhost:5000")
        with self.assertRaises(TransportError):
            client.list_tasks()

    def test_other_request_errors_are_transport_errors(self):
        self.session.request.side_effect = requests.exceptions.InvalidURL("bad url")
        with self.assertRaises(TransportError):
            self.client.toggle_task("1")

    def test_health(self):
        self.session.request.return_value = make_response(200, text="Task API server is running!")
        self.assertEqual(self.client.health(), "Task API server is running!")
        self.session.request.assert_called_once_with("GET", "http://api.test/", timeout=3)

    def test_health_when_server_is_down(self):
        self.session.request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(TransportError):
            self.client.health()


class DescribeErrorTestCase(unittest.TestCase):
    def test_unreachable_differs_from_failed(self):
        self.assertEqual(
            describe_error(TransportError("x")),
            "Server is unreachable. Please make sure the backend is running.",
        )
        self.assertEqual(
            describe_error(RequestFailedError("x", 500)),
            "Failed to load tasks. Please try again later.",
        )

    def test_known_errors_keep_their_message(self):
        self.assertEqual(describe_error(NotFoundError()), "Task not found")
        self.assertEqual(describe_error(ValidationError("Task title is required")), "Task title is required")


if __name__ == "__main__":
    unittest.main()
