import unittest
from unittest.mock import patch

import mcp_server
from mcp_server import list_tasks, get_task, add_task, toggle_task, delete_task
from taskapp.errors import NotFoundError, TransportError, ValidationError


class TestMcpTools(unittest.TestCase):

    @patch.object(mcp_server.client, "list_tasks")
    def test_list_tasks(self, mock_list):
        mock_list.return_value = [{"id": "1", "title": "Mock Task"}]

        tasks = list_tasks()
        self.assertIsInstance(tasks, list)
        self.assertEqual(tasks[0]["title"], "Mock Task")

    @patch.object(mcp_server.client, "create_task")
    def test_add_task(self, mock_create):
        mock_create.return_value = {"id": "2", "title": "New Task", "priority": "High"}

        task = add_task("New Task", priority="High")
        self.assertEqual(task["title"], "New Task")
        mock_create.assert_called_once_with("New Task", description="", priority="High")

    @patch.object(mcp_server.client, "create_task")
    def test_add_task_without_title(self, mock_create):
        mock_create.side_effect = ValidationError("Task title is required")

        self.assertEqual(add_task(""), {"error": "Task title is required"})

    @patch.object(mcp_server.client, "get_task")
    def test_get_task_not_found(self, mock_get):
        mock_get.side_effect = NotFoundError()

        self.assertEqual(get_task("99"), {"error": "Task not found"})

    @patch.object(mcp_server.client, "toggle_task")
    def test_toggle_task(self, mock_toggle):
        mock_toggle.return_value = {"id": "1", "completed": True}

        self.assertTrue(toggle_task("1")["completed"])

    @patch.object(mcp_server.client, "delete_task")
    def test_delete_task(self, mock_delete):
        mock_delete.return_value = {"message": "Task deleted successfully"}

        self.assertEqual(delete_task("1")["message"], "Task deleted successfully")

    @patch.object(mcp_server.client, "list_tasks")
    def test_unreachable_server_propagates(self, mock_list):
        mock_list.side_effect = TransportError("down")

        with self.assertRaises(TransportError):
            list_tasks()


if __name__ == "__main__":
    unittest.main()
