from uuid import uuid4

PAYMENT_ID_PREFIX = "PAY-"

class UuidIdGenerator:
    """Produces payment identifiers of the form PAY-<uuid4>."""

    def __init__(self, prefix: str = PAYMENT_ID_PREFIX):
        self.prefix = prefix

    def __call__(self) -> str:
        return f"{self.prefix}{uuid4()}"
