from typing import List, Optional
from pydantic import BaseModel, Field


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class CategoryDB(CategoryIn):
    # ids of the courses filed under this category
    courses: List[str] = Field(default_factory=list)
