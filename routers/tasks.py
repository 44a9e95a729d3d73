# routers/tasks.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from dependencies import get_task_store
from storage import TaskIndexError, TaskStore, TaskValidationError

# --- Router Setup ---
router = APIRouter(
    prefix="/tasks",
    tags=["Task API"],
)

# --- Data Models ---
class TaskCreate(BaseModel):
    task: Any = None

# --- Endpoints ---

@router.get("")
async def get_tasks(store: TaskStore = Depends(get_task_store)):
    """Get the list of all tasks."""
    return store.list()

@router.post("")
async def add_task(body: Any = Body(None), store: TaskStore = Depends(get_task_store)):
    """Appends a task to the end of the list."""
    # Anything other than a JSON object carries no task.
    task = TaskCreate.model_validate(body).task if isinstance(body, dict) else None
    try:
        tasks = store.add(task)
    except TaskValidationError:
        return JSONResponse({"error": "Task is required"}, status_code=HTTP_400_BAD_REQUEST)
    return JSONResponse(
        {"message": "Task added successfully", "tasks": tasks},
        status_code=HTTP_201_CREATED,
    )

@router.delete("/{index}")
async def delete_task(index: str, store: TaskStore = Depends(get_task_store)):
    """Deletes the task at the given position."""
    try:
        deleted_task, tasks = store.remove_at(index)
    except TaskIndexError:
        return JSONResponse({"error": "Invalid task index"}, status_code=HTTP_400_BAD_REQUEST)
    return JSONResponse(
        {"message": "Task deleted successfully", "deletedTask": deleted_task, "tasks": tasks}
    )
