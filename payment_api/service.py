import logging
from typing import Any, Callable

from payment_api.errors import NotFoundError, ValidationError
from payment_api.models import Payment, PaymentStatus
from payment_api.store import PaymentStore

logger = logging.getLogger("payment-service")

REQUIRED_FIELDS = ("customer_name", "customer_email", "amount")
MISSING_FIELDS_MESSAGE = "All fields (customer_name, customer_email, amount) are required."
NOT_FOUND_MESSAGE = "Payment not found"


def _is_missing(value: Any) -> bool:
    # Only absent/null and "" count as missing; 0 and false are stored as sent
    return value is None or value == ""


class PaymentService:
    """Creates and looks up payments against a single store.

    Identifiers come from the injected ``id_generator``, any zero-argument
    callable returning a string.
    """

    def __init__(self, store: PaymentStore, id_generator: Callable[[], str]):
        self.store = store
        self.id_generator = id_generator

    def create_payment(self, customer_name: Any, customer_email: Any, amount: Any) -> Payment:
        fields = {
            "customer_name": customer_name,
            "customer_email": customer_email,
            "amount": amount,
        }
        missing = [name for name in REQUIRED_FIELDS if _is_missing(fields[name])]
        if missing:
            logger.warning(f"Rejected payment, missing fields: {', '.join(missing)}")
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        payment = Payment(
            id=self.id_generator(),
            customer_name=customer_name,
            customer_email=customer_email,
            amount=amount,
            status=PaymentStatus.PENDING,
        )
        self.store.create(payment)
        logger.info(f"Payment {payment.id} created for {customer_email} (amount={amount})")
        return payment

    def get_payment(self, payment_id: str) -> Payment:
        payment = self.store.find_by_id(payment_id)
        if payment is None:
            logger.warning(f"Payment {payment_id} not found")
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return payment
