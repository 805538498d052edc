"""FastAPI entry point for the mock interviewer gateway."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .deps import get_llm, get_settings
from .routers import health, interview, proctoring

logger = logging.getLogger(__name__)

app = FastAPI(title="Mock Interviewer", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event() -> None:
    settings = get_settings()
    app.state.settings = settings
    if settings.has_api_key and get_llm().available:
        logger.info("GEMINI_API_KEY is configured, AI evaluation enabled")
    else:
        logger.warning("GEMINI_API_KEY is not set, fallback questions and evaluations will be used")
    logger.info("Phone detection enabled for camera frames")


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(interview.router, prefix="/api", tags=["interview"])
app.include_router(proctoring.router, prefix="/api/proctoring", tags=["proctoring"])


@app.get("/")
async def root() -> dict[str, str]:
    settings = get_settings()
    return {"service": app.title, "environment": settings.environment}


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    logger.info("Starting %s on http://%s:%d", app.title, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
