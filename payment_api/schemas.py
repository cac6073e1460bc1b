from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Literal, Optional
from payment_api.models import PaymentStatus

class PaymentCreate(BaseModel):
    # Presence is checked by the service so missing fields surface as 400, not 422
    customer_name: Optional[str] = Field(None, examples=["John Doe"])
    customer_email: Optional[str] = Field(None, examples=["john.doe@example.com"])
    amount: Any = Field(None, examples=[50.0])


class PaymentRead(BaseModel):
    id: str
    customer_name: str
    customer_email: str
    amount: Any
    status: PaymentStatus

    model_config = ConfigDict(from_attributes=True)


class PaymentEnvelope(BaseModel):
    status: Literal["success"] = "success"
    payment: PaymentRead


class ErrorEnvelope(BaseModel):
    status: Literal["error"] = "error"
    message: str
