from functools import lru_cache

from fastapi import Request

from studynotion.services.category_service import CategoryService
from studynotion.services.payment_service import PaymentService
from studynotion.utils.errors import AppError


@lru_cache(maxsize=1)
def get_category_service() -> CategoryService:
    return CategoryService()


@lru_cache(maxsize=1)
def get_payment_service() -> PaymentService:
    return PaymentService()


def get_current_user_id(request: Request) -> str:
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise AppError("Authentication required", status_code=401)
    return user_id
