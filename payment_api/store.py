import threading
from typing import List, Optional

from payment_api.models import Payment


class PaymentStore:
    """Append-only in-memory payment storage.

    Records keep insertion order and are never updated or removed. Lookups
    are a linear scan over the stored records.
    """

    def __init__(self):
        self._payments: List[Payment] = []
        self._lock = threading.Lock()

    def create(self, payment: Payment) -> Payment:
        with self._lock:
            self._payments.append(payment)
        return payment

    def find_by_id(self, payment_id: str) -> Optional[Payment]:
        with self._lock:
            return next((p for p in self._payments if p.id == payment_id), None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)
