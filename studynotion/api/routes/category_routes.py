# category_routes.py
import logging
from fastapi import APIRouter, Body, Depends

from studynotion.api.dependencies import get_category_service, get_current_user_id
from studynotion.services.category_service import CategoryService
from studynotion.utils.errors import AppError, InternalError

router = APIRouter(prefix="/course", tags=["categories"])
logger = logging.getLogger(__name__)


@router.post("/createCategory")
def create_category(
    body: dict = Body({}),
    user_id: str = Depends(get_current_user_id),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        category = svc.create(body)
    except AppError:
        raise
    except Exception as e:
        logger.exception("createCategory error")
        raise InternalError(str(e))
    return {"success": True, "data": category}


@router.get("/showAllCategories")
def show_all_categories(svc: CategoryService = Depends(get_category_service)):
    try:
        categories = svc.list_all()
    except Exception as e:
        logger.exception("showAllCategories error")
        raise InternalError(str(e))
    return {
        "success": True,
        "message": "All categories returned successfully",
        "data": categories,
    }


@router.post("/getCategoryPageDetails")
def category_page_details(body: dict = Body({}), svc: CategoryService = Depends(get_category_service)):
    try:
        data = svc.page_details(body)
    except AppError:
        raise
    except Exception as e:
        # the underlying message is exposed on purpose for this endpoint
        logger.exception("categoryPageDetails error")
        raise InternalError("Internal server error", error=str(e))
    return {"success": True, "data": data}
