# studynotion/services/category_service.py
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional
import logging

from pydantic import ValidationError as SchemaError
from pymongo.database import Database

from studynotion.models.category_model import CategoryIn, CategoryDB
from studynotion.models.course_model import CourseStatus
from studynotion.repositories.mongo_repository import MongoRepository, to_object_id
from studynotion.utils.errors import NotFoundError, ValidationError
from studynotion.utils.selection import random_index

logger = logging.getLogger(__name__)

INSTRUCTOR_WITH_EMAIL = {"firstName": 1, "lastName": 1, "email": 1, "image": 1}
INSTRUCTOR_PUBLIC = {"firstName": 1, "lastName": 1, "image": 1}
MOST_SELLING_LIMIT = 10


class CategoryService:
    def __init__(self, db: Optional[Database] = None, pick_index: Callable[[int], int] = random_index) -> None:
        self.categories = MongoRepository("categories", db)
        self.courses = MongoRepository("courses", db)
        self.users = MongoRepository("users", db)
        self.ratings = MongoRepository("ratingandreviews", db)
        self.pick_index = pick_index

    # -------------------- internal helpers --------------------
    def _published_courses(
        self,
        category: Dict[str, Any],
        instructor_fields: Dict[str, int],
        with_ratings: bool = False,
    ) -> List[Dict[str, Any]]:
        courses = self.courses.find_by_ids(
            category.get("courses") or [],
            {"status": CourseStatus.PUBLISHED.value},
        )
        for course in courses:
            instructor = self.users.find_by_ids([course.get("instructor")], projection=instructor_fields)
            course["instructor"] = instructor[0] if instructor else None
            if with_ratings:
                course["ratingAndReviews"] = self.ratings.find_by_ids(course.get("ratingAndReviews") or [])
        return courses

    def _expand(self, category: Dict[str, Any], instructor_fields: Dict[str, int], with_ratings: bool = False) -> Dict[str, Any]:
        category = dict(category)
        category["courses"] = self._published_courses(category, instructor_fields, with_ratings)
        return category

    # -------------------- API --------------------
    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            data = CategoryIn(**(payload or {}))
        except SchemaError:
            raise ValidationError("All fields are required")

        category = self.categories.create(CategoryDB(**data.model_dump()).model_dump())
        logger.info(f"[categories.create] category '{data.name}' created with id {category['_id']}")
        return category

    def list_all(self) -> List[Dict[str, Any]]:
        return self.categories.find({}, {"name": True, "description": True})

    def page_details(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        category_id = (payload or {}).get("categoryId")
        # 1) Selected category with its published courses
        selected = self.categories.find_one(category_id) if category_id else None
        if not selected:
            raise NotFoundError("Category not found")
        selected_category = self._expand(selected, INSTRUCTOR_WITH_EMAIL, with_ratings=True)

        # 2) One random category other than the selected one
        others = self.categories.find({"_id": {"$ne": to_object_id(category_id)}})
        different_category = None
        if others:
            pick = others[self.pick_index(len(others))]
            doc = self.categories.find_one(pick["_id"])
            if doc:
                different_category = self._expand(doc, INSTRUCTOR_PUBLIC)

        # 3) Top sellers across every category, by number of enrolled students
        all_courses: List[Dict[str, Any]] = []
        for cat in self.categories.find({}):
            all_courses.extend(self._published_courses(cat, INSTRUCTOR_PUBLIC))

        # sorted() is stable: ties keep category/course order
        all_courses = sorted(all_courses, key=lambda c: len(c.get("studentsEnrolled") or []), reverse=True)

        return {
            "selectedCategory": selected_category,
            "differentCategory": different_category,
            "mostSellingCourses": all_courses[:MOST_SELLING_LIMIT],
        }
