from .main import main_bp
from .tasks import tasks_bp

__all__ = ["main_bp", "tasks_bp"]
