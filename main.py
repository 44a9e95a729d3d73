# main.py
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from logging_setup import setup_logging
from routers import tasks, views

# --- Environment loading ---
load_dotenv()

setup_logging()

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Application starting up, tasks file: %s", os.getenv("TASKS_FILE", "tasks.json"))
    yield
    logger.info("Application shutting down...")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Task Manager",
    description="A small task list with a JSON API and an HTML view, stored in a JSON file.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Mount Static Files ---
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

# --- Include Routers ---
app.include_router(tasks.router)
app.include_router(views.router)

# --- Main Entry Point ---
if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "5001"))
    logger.info("Server is running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
