"""
Console front end for the Task API.

Commands:
  list                                   show all tasks
  show <id>                              show one task in full
  add <title> [| description [| priority]]
  toggle <id>                            mark done / not done
  delete <id>
  help
"""

import logging

from taskapp.errors import TaskError, describe_error
from taskapp.services.api_client import TaskApiClient

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 80


def format_task_line(task: dict) -> str:
    box = "[x]" if task.get("completed") else "[ ]"
    line = f"{box} {task['id']}. {task['title']}"
    if task.get("priority"):
        line += f" ({task['priority']})"
    if task.get("description"):
        line += f"\n      {task['description'][:PREVIEW_LENGTH]}..."
    return line


def format_task_detail(task: dict) -> str:
    status = "Completed" if task.get("completed") else "Pending"
    lines = [
        f"Task {task['id']}: {task['title']}",
        f"Status:   {status}",
        f"Priority: {task.get('priority', '')}",
    ]
    if task.get("description"):
        lines.append("")
        lines.append(task["description"])
    return "\n".join(lines)


def handle_command(client: TaskApiClient, line: str) -> str:
    """Run a single console command and return the text to print."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command in ("help", "?"):
        return __doc__.strip()

    if command == "list":
        try:
            tasks = client.list_tasks()
        except TaskError as e:
            return describe_error(e, "load tasks")
        if not tasks:
            return "No tasks available."
        return "\n".join(format_task_line(task) for task in tasks)

    if command in ("show", "toggle", "delete") and not arg:
        return f"Usage: {command} <id>"

    if command == "show":
        try:
            return format_task_detail(client.get_task(arg))
        except TaskError as e:
            return describe_error(e, "load task")

    if command == "add":
        parts = [part.strip() for part in arg.split("|")]
        title = parts[0]
        description = parts[1] if len(parts) > 1 else ""
        priority = parts[2] if len(parts) > 2 else None
        try:
            task = client.create_task(title, description=description, priority=priority)
        except TaskError as e:
            return describe_error(e, "create task")
        return f"Created task {task['id']}: {task['title']}"

    if command == "toggle":
        try:
            task = client.toggle_task(arg)
        except TaskError as e:
            return describe_error(e, "update task")
        state = "completed" if task["completed"] else "not completed"
        return f"Task {task['id']} marked as {state}."

    if command == "delete":
        try:
            response = client.delete_task(arg)
        except TaskError as e:
            return describe_error(e, "delete task")
        return response.get("message", "Task deleted successfully")

    return f"Unknown command '{command}'. Type 'help' for a list of commands."


def check_connection(client: TaskApiClient) -> str:
    try:
        client.health()
    except TaskError as e:
        return describe_error(e, "reach the task server")
    return f"Connected to {client.base_url}. Type 'help' for commands, 'exit' to quit."


def main():
    client = TaskApiClient()
    print(check_connection(client))

    while True:
        try:
            user_input = input("\ntasks> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if user_input.lower() in ("exit", "quit"):
            break
        if not user_input:
            continue
        print(handle_command(client, user_input))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main()
