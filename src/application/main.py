"""HTTP service for transaction creation and lookup.

This module exposes the orchestrator over FastAPI. Handlers are thin: they
parse input, delegate to the core, and let the registered exception handlers
translate TransactionServiceError subclasses into HTTP responses.
"""

import logging
import time

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from core import TransactionContext, create_transaction, get_transaction
from core.errors import InvalidRequestError, TransactionServiceError
from core.model import Transaction, TransactionRequest
from infrastructure import build_context, create_db_engine, init_db

from .config import load_settings
from .metrics import record_request

logger = logging.getLogger(__name__)


def get_context(request: Request) -> TransactionContext:
    """Return the orchestrator context attached to the application."""
    return request.app.state.context


async def handle_service_error(request: Request, exc: TransactionServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} invalid body: {problems}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": f"Invalid request body: {problems}"}
    )


def create_app(context: TransactionContext) -> FastAPI:
    """
    Build the FastAPI application around an orchestrator context.

    Parameters
    ----------
    context : TransactionContext
        Collaborators used by every request.

    Returns
    -------
    FastAPI
        Application exposing POST /transaction, GET /transaction/{id},
        /metrics and /health.
    """
    app = FastAPI(title="Transaction Service", version="1.0.0")
    app.state.context = context

    app.add_exception_handler(TransactionServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    @app.middleware("http")
    async def record_metrics(request: Request, call_next):
        # Wraps body validation too, so rejected requests are counted
        start = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            route = request.scope.get("route")
            endpoint = route.path if route is not None else "unmatched"
            record_request(request.method, endpoint, time.perf_counter() - start)

    @app.post("/transaction", response_model=Transaction, status_code=status.HTTP_201_CREATED)
    def create_transaction_endpoint(
        body: TransactionRequest, context: TransactionContext = Depends(get_context)
    ) -> Transaction:
        return create_transaction(context, body)

    @app.get("/transaction/", response_model=Transaction)
    def missing_transaction_id() -> Transaction:
        raise InvalidRequestError("Missing id parameter")

    @app.get("/transaction/{transaction_id}", response_model=Transaction)
    def get_transaction_endpoint(
        transaction_id: str, context: TransactionContext = Depends(get_context)
    ) -> Transaction:
        return get_transaction(context, transaction_id)

    @app.get("/metrics")
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def main():
    """
    Run the transaction service.

    Loads settings from the environment, configures logging, creates the
    transactions table if needed and serves the API with uvicorn.
    """
    settings = load_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    engine = create_db_engine(settings.database_url, timeout=settings.db_timeout)
    init_db(engine)

    app = create_app(build_context(settings, engine=engine))

    logger.info(f"Transaction Service running on port: {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
