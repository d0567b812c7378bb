# payment_routes.py
import logging
from fastapi import APIRouter, Body, Depends

from studynotion.api.dependencies import get_current_user_id, get_payment_service
from studynotion.services.payment_service import PaymentService
from studynotion.utils.errors import AppError, InternalError

router = APIRouter(prefix="/payment", tags=["payments"])
logger = logging.getLogger(__name__)


@router.post("/capturePayment")
def capture_payment(
    body: dict = Body({}),
    user_id: str = Depends(get_current_user_id),
    svc: PaymentService = Depends(get_payment_service),
):
    try:
        order = svc.capture(body, user_id)
    except AppError:
        raise
    except Exception:
        # gateway/store details stay in the log
        logger.exception("capturePayment error")
        raise InternalError("Could not initiate order")
    return {"success": True, "message": order}


@router.post("/verifyPayment")
def verify_payment(
    body: dict = Body({}),
    user_id: str = Depends(get_current_user_id),
    svc: PaymentService = Depends(get_payment_service),
):
    try:
        svc.verify(body, user_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("verifyPayment error")
        raise InternalError(str(e))
    return {"success": True, "message": "Payment Verified"}


@router.post("/sendPaymentSuccessEmail")
def send_payment_success_email(
    body: dict = Body({}),
    user_id: str = Depends(get_current_user_id),
    svc: PaymentService = Depends(get_payment_service),
):
    try:
        svc.send_success_email(body, user_id)
    except AppError:
        raise
    except Exception:
        logger.exception("sendPaymentSuccessEmail error")
        raise InternalError("Could not send email")
    return {"success": True, "message": "Email sent"}
