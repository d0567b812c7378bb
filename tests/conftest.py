import smtplib
from typing import Any, Dict, List, Optional

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

import studynotion.api.middleware.session_middleware as session_module
from studynotion.api.app import create_app
from studynotion.api.dependencies import get_category_service, get_payment_service
from studynotion.services.category_service import CategoryService
from studynotion.services.payment_service import PaymentService

SECRET = "test_razorpay_secret"
SESSION_TOKEN = "session-token-1"


class FakeGateway:
    """Records order requests instead of calling Razorpay."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.orders: List[Dict[str, Any]] = []

    def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        if self.fail:
            raise RuntimeError("gateway unavailable")
        self.orders.append(options)
        return {"id": f"order_test_{len(self.orders)}", "entity": "order", "status": "created", **options}


class FakeMailer:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Dict[str, str]] = []

    def send(self, to_email: str, subject: str, body: str):
        if self.fail:
            raise smtplib.SMTPException("smtp down")
        self.sent.append({"to": to_email, "subject": subject, "body": body})


class FakeSessionStore:
    def __init__(self, sessions: Dict[str, str]):
        self.sessions = sessions

    def get(self, key):
        value = self.sessions.get(key)
        return value.encode("utf-8") if value is not None else None


class Seeder:
    """Inserts documents shaped like the production collections."""

    def __init__(self, db):
        self.db = db

    def user(self, first_name: str = "Asha", email: Optional[str] = None, **extra) -> str:
        doc = {
            "firstName": first_name,
            "lastName": "Rao",
            "email": email or f"{first_name.lower()}@example.com",
            "image": f"https://img.example.com/{first_name}.png",
            "courses": [],
            "courseProgress": [],
        }
        doc.update(extra)
        return str(self.db["users"].insert_one(doc).inserted_id)

    def rating(self, user_id: str, rating: int = 5, review: str = "Great") -> str:
        doc = {"user": ObjectId(user_id), "rating": rating, "review": review}
        return str(self.db["ratingandreviews"].insert_one(doc).inserted_id)

    def course(
        self,
        name: str = "Python 101",
        price: Optional[float] = 499.0,
        status: str = "Published",
        instructor: Optional[str] = None,
        students: Optional[List[str]] = None,
        ratings: Optional[List[str]] = None,
    ) -> str:
        doc = {
            "courseName": name,
            "status": status,
            "instructor": ObjectId(instructor) if instructor else None,
            "studentsEnrolled": [ObjectId(s) for s in students or []],
            "ratingAndReviews": [ObjectId(r) for r in ratings or []],
        }
        if price is not None:
            doc["price"] = price
        return str(self.db["courses"].insert_one(doc).inserted_id)

    def category(self, name: str = "Web Dev", courses: Optional[List[str]] = None, description: str = "") -> str:
        doc = {"name": name, "description": description, "courses": [ObjectId(c) for c in courses or []]}
        return str(self.db["categories"].insert_one(doc).inserted_id)


@pytest.fixture
def db():
    return mongomock.MongoClient()["studynotion_test"]


@pytest.fixture
def seed(db):
    return Seeder(db)


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def category_service(db):
    return CategoryService(db=db)


@pytest.fixture
def payment_service(db, gateway, mailer):
    return PaymentService(db=db, gateway=gateway, mailer=mailer, secret=SECRET)


@pytest.fixture
def student(seed):
    return seed.user("Asha")


@pytest.fixture
def client(monkeypatch, category_service, payment_service, student):
    monkeypatch.setattr(session_module, "get_redis_client", lambda: FakeSessionStore({SESSION_TOKEN: student}))
    app = create_app(init_db=False)
    app.dependency_overrides[get_category_service] = lambda: category_service
    app.dependency_overrides[get_payment_service] = lambda: payment_service
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {SESSION_TOKEN}"}
