"""
MCP Server wrapping the Task API (`mcp_server.py`)
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from taskapp.errors import NotFoundError, ValidationError
from taskapp.services.api_client import TaskApiClient

# stdout is the stdio transport, so logs go to stderr
logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Task Manager MCP Server")

client = TaskApiClient()


@mcp.resource("todo://list")
def list_tasks() -> list:
    """Fetch all tasks (descriptions shortened) from the Task API."""
    return client.list_tasks()


@mcp.tool()
def get_task(task_id: str) -> dict:
    """Fetch one task with its full description."""
    try:
        return client.get_task(task_id)
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def add_task(title: str, description: str = "", priority: str = "Medium") -> dict:
    """
    Add a new task via the Task API.
    Priority is one of High, Medium or Low.
    """
    try:
        return client.create_task(title, description=description, priority=priority)
    except ValidationError as e:
        return {"error": e.message}


@mcp.tool()
def toggle_task(task_id: str) -> dict:
    """Flip a task between done and not done."""
    try:
        return client.toggle_task(task_id)
    except NotFoundError as e:
        return {"error": e.message}


@mcp.tool()
def delete_task(task_id: str) -> dict:
    """Delete a task permanently."""
    try:
        return client.delete_task(task_id)
    except NotFoundError as e:
        return {"error": e.message}


if __name__ == "__main__":
    logger.info(f"Starting MCP server against {client.base_url}...")
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
