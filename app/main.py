# main.py

import uuid
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager

from app.config import Settings, get_settings
from app.schemas import OrderRequest
from app.readiness import ReadinessTracker, health_payload
from app.validation import ValidationOutcome, validate_order
from app.orders import build_order_record
from app.responses import order_json_response
from app.logger import configure_logging, log_debug, log_info, log_warning


# Mark the service ready once startup has completed
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Move the readiness tracker to READY on startup.
    The transition is one-shot; shutdown does not revert it.
    """
    settings = app.state.settings
    app.state.readiness.init()
    log_info(f"app starting on port: {settings.port}")
    app.state.readiness.mark_ready()

    yield
    log_info("Shutting down the Order Intake API...")


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "N/A")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its own readiness tracker and settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="open-api doc",
        version="1.0.0",
        docs_url="/docs",
        openapi_url="/v3/api-docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.readiness = ReadinessTracker()

    # Set up a middleware to generate request_id for each request and log it
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """
        Reuse the Request-ID header or generate a new one, and log the request for tracing.
        """
        request_id = request.headers.get("Request-ID")
        if request_id:
            log_info(f"Received Request-ID header: {request_id}")
        else:
            request_id = str(uuid.uuid4())
            log_info(f"Request ID generated: {request_id}", request_id=request_id)
        request.state.request_id = request_id

        log_info(f"Received request: {request.method} {request.url}", request_id=request_id)

        response = await call_next(request)
        # add the request_id to the response headers for tracking
        response.headers["Request-ID"] = request_id
        log_info(f"Completed request: {request.method} {request.url} with status {response.status_code}", request_id=request_id)
        return response

    # Body does not match the order shape: answer 400 in the order error format instead of 422
    @app.exception_handler(RequestValidationError)
    async def malformed_order_handler(request: Request, exc: RequestValidationError):
        log_warning(f"Malformed request body: {exc.errors()}", request_id=_request_id(request))
        return order_json_response(ValidationOutcome.MALFORMED_REQUEST)

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return "Test"

    # API: /healthcheck - GET readiness probe
    @app.get("/healthcheck")
    def healthcheck(request: Request):
        """
        Report 200 once startup has completed, 503 before.
        """
        status_code, body = health_payload(request.app.state.readiness)
        return JSONResponse(content=body, status_code=status_code)

    # API: /orders - POST to create a new order
    @app.post("/orders")
    def create_order(request: Request, order: OrderRequest):
        """
        Validate an order and answer with a synthesized order record.

        Nothing is stored: the record is built for the response and discarded.
        """
        request_id = _request_id(request)
        outcome = validate_order(order)
        log_debug(f"Order from customer {order.customer_id!r} with {len(order.items)} item(s): {outcome.value}", request_id=request_id)
        if outcome is not ValidationOutcome.VALID:
            log_warning(f"Order rejected: {outcome.value}", request_id=request_id)
            return order_json_response(outcome, legacy_customer_status=request.app.state.settings.legacy_customer_status)

        record = build_order_record(order.items)
        log_info(f"Order accepted: {record.id} with {len(record.items)} item(s)", request_id=request_id)
        return order_json_response(outcome, record)

    # API: /orders/{order_id} - GET echoes the id
    @app.get("/orders/{order_id}", response_class=PlainTextResponse)
    def read_order(order_id: str):
        return order_id

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
