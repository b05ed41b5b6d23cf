"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.adapters.inbound.http.errors import BadRequestAlertException
from app.adapters.inbound.http.routes import router
from app.infrastructure.logging.logger import logger

# Load environment variables from .env file
load_dotenv()

PROBLEM_JSON = "application/problem+json"


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    """Render a BadRequestAlertException as a problem document."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.detail,
        headers=exc.headers,
        media_type=PROBLEM_JSON,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation errors as 400 problem documents."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": "Bad Request",
            "status": status.HTTP_400_BAD_REQUEST,
            "detail": jsonable_encoder(exc.errors()),
        },
        media_type=PROBLEM_JSON,
    )


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    Returns:
        Configured application
    """
    application = FastAPI(
        title="Dealer Service",
        description="CRUD resource for dealers with criteria filtering and pagination",
        version="0.1.0",
    )
    application.include_router(router)
    application.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    return application


app = create_app()
