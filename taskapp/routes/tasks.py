from flask import Blueprint, current_app, jsonify, request
import logging

from ..errors import TaskError

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def get_store():
    return current_app.extensions["task_store"]


@tasks_bp.errorhandler(TaskError)
def handle_task_error(error):
    return jsonify({"message": error.message}), error.status_code


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    logger.info("GET /api/tasks - Request received")
    tasks = get_store().list()
    logger.info(f"Sending tasks: {len(tasks)}")
    return jsonify(tasks)


@tasks_bp.route("/<task_id>", methods=["GET"])
def get_task(task_id):
    logger.info(f"GET /api/tasks/{task_id} - Request received")
    task = get_store().get(task_id)
    logger.info(f"Task found, sending: {task.title}")
    return jsonify(task.to_dict())


@tasks_bp.route("", methods=["POST"])
def create_task():
    logger.info("POST /api/tasks - Request received")
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    task = get_store().create(
        data.get("title"),
        description=data.get("description", ""),
        priority=data.get("priority"),
        completed=data.get("completed", False),
    )
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/<task_id>/toggle", methods=["PUT"])
def toggle_task(task_id):
    logger.info(f"PUT /api/tasks/{task_id}/toggle - Request received")
    task = get_store().toggle(task_id)
    return jsonify(task.to_dict())


@tasks_bp.route("/<task_id>", methods=["DELETE"])
def delete_task(task_id):
    logger.info(f"DELETE /api/tasks/{task_id} - Request received")
    get_store().delete(task_id)
    return jsonify({"message": "Task deleted successfully"})
