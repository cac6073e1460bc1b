from dataclasses import dataclass
from typing import Any
import enum

class PaymentStatus(str, enum.Enum):
    PENDING = "pending"

@dataclass(frozen=True)
class Payment:
    id: str
    customer_name: str
    customer_email: str
    amount: Any
    status: PaymentStatus = PaymentStatus.PENDING
