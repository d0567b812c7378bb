from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class CourseStatus(str, Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"


class CourseProgressDB(BaseModel):
    """One per (user, course) enrollment; completedVideos starts empty."""
    courseID: str
    userId: str
    completedVideos: List[str] = Field(default_factory=list)
