import uvicorn
from contextlib import asynccontextmanager
from typing import Callable, Optional
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from payment_api.config import Settings, get_settings
from payment_api.errors import PaymentError
from payment_api.gateway import PaystackClient
from payment_api.identifiers import UuidIdGenerator
from payment_api.logger import get_logger
from payment_api.schemas import ErrorEnvelope, PaymentCreate, PaymentEnvelope, PaymentRead
from payment_api.service import PaymentService
from payment_api.store import PaymentStore


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(message=message).model_dump())


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PaymentStore] = None,
    id_generator: Optional[Callable[[], str]] = None,
    gateway: Optional[PaystackClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logger = get_logger(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Payment service ready (gateway: {app.state.gateway.base_url})")
        yield
        app.state.gateway.close()

    app = FastAPI(title="Payment Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else PaymentStore()
    app.state.payment_service = PaymentService(app.state.store, id_generator or UuidIdGenerator())

    if gateway is None:
        if not settings.paystack_api_key:
            logger.warning("PAYSTACK_API_KEY is not set; gateway requests will be rejected")
        gateway = PaystackClient(settings.paystack_api_key, base_url=settings.paystack_base_url)
    app.state.gateway = gateway

    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg") if errors else "malformed body"
        logger.warning(f"Rejected request to {request.url.path}: {detail}")
        return _error_response(400, f"Invalid request body: {detail}")

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Payment API!"}

    @app.post("/api/v1/payments", response_model=PaymentEnvelope, status_code=201)
    async def create_payment(
        payment_data: PaymentCreate,
        service: PaymentService = Depends(get_payment_service),
    ):
        payment = service.create_payment(
            payment_data.customer_name,
            payment_data.customer_email,
            payment_data.amount,
        )
        return PaymentEnvelope(payment=PaymentRead.model_validate(payment))

    @app.get("/api/v1/payments/{payment_id}", response_model=PaymentEnvelope)
    async def get_payment(payment_id: str, service: PaymentService = Depends(get_payment_service)):
        payment = service.get_payment(payment_id)
        return PaymentEnvelope(payment=PaymentRead.model_validate(payment))

    return app


app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
