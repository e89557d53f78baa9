from flask import Blueprint

main_bp = Blueprint("main", __name__)


# Root route for liveness checks
@main_bp.route("/", methods=["GET"])
def index():
    return "Task API server is running!", 200, {"Content-Type": "text/plain; charset=utf-8"}
