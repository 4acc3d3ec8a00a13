"""
FastAPI dependencies shared by API routes.

The task service is created once in ``create_app`` and kept on
``app.state``; routes receive it through :func:`get_task_service`
instead of importing a module‑level instance.  Tests can swap the
service by building an app with their own store or by overriding this
dependency.
"""

from fastapi import Request

from task_board_api.app.services.task_service import TaskService


def get_task_service(request: Request) -> TaskService:
    """Return the task service bound to the running application."""
    return request.app.state.task_service
