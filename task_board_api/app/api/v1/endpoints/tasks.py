"""
API endpoints for task board items.

These routes expose the task service over HTTP.  Each handler calls
one service operation and converts the returned
:class:`~task_board_api.app.services.results.ServiceResult` into a
response with :func:`to_response`:

* ``OK`` → 200 with the task or task list
* ``CREATED`` → 201 with the task and a ``Location`` header
* ``NO_CONTENT`` → 204 with an empty body
* ``NOT_FOUND`` and ``STORE_FAILURE`` → 400 with ``{"detail": message}``

``/tasks/complete`` is registered before ``/tasks/{task_id}`` so it
is not captured by the id route.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from task_board_api.app.api.deps import get_task_service
from task_board_api.app.schemas.task import TaskCreate, TaskRead
from task_board_api.app.services.results import ResultKind, ServiceResult
from task_board_api.app.services.task_service import TaskService

router = APIRouter()

_DECLINED = {"description": "Request declined: task not found, no tasks to list, or store failure"}


def to_response(result: ServiceResult, location: Optional[str] = None) -> Response:
    """Map a service result to an HTTP response."""
    if result.kind is ResultKind.OK:
        return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(result.value, by_alias=True))
    if result.kind is ResultKind.CREATED:
        headers = {"Location": location} if location else None
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=jsonable_encoder(result.value, by_alias=True),
            headers=headers,
        )
    if result.kind is ResultKind.NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": result.message})


@router.get(
    "/tasks",
    response_model=List[TaskRead],
    summary="List all tasks",
    responses={400: _DECLINED},
)
async def get_all_tasks(service: TaskService = Depends(get_task_service)) -> Response:
    """Return all tasks, open tasks first, each group ordered by priority.

    Responds with 400 when there are no tasks at all.
    """
    return to_response(await service.get_all_tasks())


@router.get(
    "/tasks/complete",
    response_model=List[TaskRead],
    summary="List completed tasks",
    responses={400: _DECLINED},
)
async def get_complete_tasks(service: TaskService = Depends(get_task_service)) -> Response:
    """Return completed tasks ordered by priority.

    Responds with 400 when no task is complete.
    """
    return to_response(await service.get_complete_tasks())


@router.get(
    "/tasks/{task_id}",
    response_model=TaskRead,
    summary="Get a task",
    responses={400: _DECLINED},
)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)) -> Response:
    """Return a single task by id."""
    return to_response(await service.get_task(task_id))


@router.post(
    "/tasks",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={400: _DECLINED},
)
async def add_task(
    task_in: TaskCreate,
    request: Request,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Create a task.

    The store assigns the id; an ``id`` sent in the body is ignored.
    The ``Location`` header points at the new task.
    """
    result = await service.add_task(task_in)
    location = None
    if result.kind is ResultKind.CREATED:
        location = request.app.url_path_for("get_task", task_id=str(result.value.id))
    return to_response(result, location=location)


@router.put(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a task's fields",
    responses={400: _DECLINED},
)
async def update_task(
    task_id: int,
    task_in: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Replace ``name``, ``isComplete`` and ``priority`` of a task.

    The task keeps its id.  Responds with 204 and no body; fetch the
    task again to see its new state.
    """
    return to_response(await service.update_task(task_id, task_in))


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={400: _DECLINED},
)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> Response:
    """Delete a task by id."""
    return to_response(await service.delete_task(task_id))
