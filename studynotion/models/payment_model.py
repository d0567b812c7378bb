from typing import List
from pydantic import BaseModel, Field


class CapturePaymentIn(BaseModel):
    courses: List[str] = Field(..., min_length=1)


class VerifyPaymentIn(BaseModel):
    razorpay_order_id: str = Field(..., min_length=1)
    razorpay_payment_id: str = Field(..., min_length=1)
    razorpay_signature: str = Field(..., min_length=1)
    courses: List[str]


class PaymentSuccessEmailIn(BaseModel):
    orderId: str = Field(..., min_length=1)
    paymentId: str = Field(..., min_length=1)
    # smallest currency unit (paise)
    amount: float = Field(..., gt=0, allow_inf_nan=False)


class OrderOptions(BaseModel):
    # Razorpay expects the amount in paise
    amount: int
    currency: str = "INR"
    receipt: str
