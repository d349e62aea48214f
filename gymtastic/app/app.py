# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401
from .env_loader import get_current_environment

import os
import logging

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from .models import EnvironmentResponse
from .routers import sessions_router

"""FastAPI application hosting live workout sessions.

Exposes routes for starting, driving and finishing workout sessions. This
module configures CORS and logging behavior.
"""

logger = logging.getLogger(__name__)

app = FastAPI()
app.include_router(sessions_router)
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=[
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure basic logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Configure the logging for the app itself if the user specifies it.
if "LOG_LEVEL" in os.environ:
    match os.environ["LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
    logging.getLogger("gymtastic").setLevel(log_level)


@app.get("/health")
@app.options("/health")
def health_check(response: Response) -> dict[str, str]:
    """Health check endpoint that returns 200 status with CORS from anywhere."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "*"
    return {"status": "healthy"}


@app.get("/environment", response_model=EnvironmentResponse)
def get_environment() -> EnvironmentResponse:
    """Get the current environment configuration."""
    environment = get_current_environment()
    return EnvironmentResponse(environment=environment)
