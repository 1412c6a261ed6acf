"""FastAPI application factory."""

import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wish_service.api.wish_models import WishCreated, WishList, WishOut
from wish_service.app_logging import configure_logging
from wish_service.config import parse_cors_origins
from wish_service.containers import AppContainer
from wish_service.domain.wishes import WishFilters
from wish_service.services.photos import StorageFailure
from wish_service.services.validation import (
    SubmissionValidationError,
    validate_submission,
)

ENDPOINTS = {
    "GET /": "Service information",
    "GET /health": "Health check",
    "GET /submit-wish": "List submitted wishes, optionally filtered",
    "POST /submit-wish": "Submit a new wish",
}

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    max_body_bytes = container.settings.max_body_bytes

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        state_container.photo_storage.ensure_directory()
        logger.info(
            "Uploads directory: %s", state_container.photo_storage.uploads_dir
        )
        yield
        logger.info("Shutting down wish service")

    app = FastAPI(title="Wish Service", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_and_limit_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        logger.info("Received %s request to %s", request.method, request.url.path)
        content_length = request.headers.get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > max_body_bytes:
                return _body_too_large()
        return await call_next(request)

    @app.get("/")
    async def index() -> dict[str, object]:
        """Service information with the available endpoints."""
        return {"message": "Wish service is running", "endpoints": ENDPOINTS}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/submit-wish")
    async def list_wishes(  # noqa: PLR0913
        request: Request,
        name: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
        input_text: str | None = None,
        gender: str | None = None,
        temp_image_path: str | None = None,
        user_photo_path: str | None = None,
    ) -> Response:
        """Return stored wishes matching the query parameters."""
        state_container: AppContainer = request.app.state.container
        filters = WishFilters(
            name=name,
            email=email,
            phone_number=phone_number,
            input_text=input_text,
            gender=gender,
            temp_image_path=temp_image_path,
            user_photo_path=user_photo_path,
        )
        try:
            records = state_container.wish_service.search(filters)
        except Exception as exc:
            logger.exception("Error retrieving wishes")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to retrieve wishes",
                details=str(exc),
            )
        body = WishList(
            total=len(records),
            wishes=[WishOut.from_record(record) for record in records],
        )
        return JSONResponse(body.model_dump(mode="json", by_alias=True))

    @app.post("/submit-wish")
    async def submit_wish(request: Request) -> Response:
        """Validate a submission, store its photo and record it."""
        state_container: AppContainer = request.app.state.container
        raw_body = await request.body()
        if len(raw_body) > max_body_bytes:
            return _body_too_large()
        payload = await _read_payload(request, raw_body)
        if payload is None:
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

        try:
            submission = validate_submission(payload)
        except SubmissionValidationError as exc:
            logger.info("Rejected wish submission: %s", exc.message)
            return _error(status.HTTP_400_BAD_REQUEST, exc.message)

        try:
            record = await run_in_threadpool(
                state_container.wish_service.submit, submission
            )
        except StorageFailure as exc:
            logger.exception("Failed to store wish photo")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Submission failed",
                details=str(exc),
            )
        except Exception as exc:
            logger.exception("Error submitting wish")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Submission failed",
                details=str(exc),
            )

        body = WishCreated(wish=WishOut.from_record(record))
        return JSONResponse(
            body.model_dump(mode="json", by_alias=True),
            status_code=status.HTTP_201_CREATED,
        )

    return app


async def _read_payload(
    request: Request, raw_body: bytes
) -> dict[str, object] | None:
    """Return the submitted fields from a form or JSON object body.

    An empty body counts as an empty object.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    if not raw_body.strip():
        return {}
    try:
        payload = await request.json()
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Build an error response in the API's error shape."""
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(content, status_code=status_code)


def _body_too_large() -> JSONResponse:
    return _error(
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "Request body too large"
    )
