# routers/views.py
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_303_SEE_OTHER, HTTP_400_BAD_REQUEST

from dependencies import get_task_store
from storage import TaskIndexError, TaskStore, TaskValidationError

router = APIRouter(tags=["Task Pages"])

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, store: TaskStore = Depends(get_task_store)):
    """Renders the task list page."""
    return templates.TemplateResponse(request, "index.html", {"tasks": store.list()})


@router.post("/add")
async def add_task(task: Optional[str] = Form(None), store: TaskStore = Depends(get_task_store)):
    try:
        store.add(task)
    except TaskValidationError:
        return PlainTextResponse("Task is required", status_code=HTTP_400_BAD_REQUEST)
    return RedirectResponse(url="/", status_code=HTTP_303_SEE_OTHER)


@router.get("/delete/{index}")
async def delete_task(index: str, store: TaskStore = Depends(get_task_store)):
    try:
        store.remove_at(index)
    except TaskIndexError:
        return PlainTextResponse("Invalid task index", status_code=HTTP_400_BAD_REQUEST)
    return RedirectResponse(url="/", status_code=HTTP_303_SEE_OTHER)
