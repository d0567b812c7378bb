# studynotion/services/payment_service.py
from __future__ import annotations

from typing import Any, Dict, Optional
import logging
import math
import time

from bson import ObjectId
from pydantic import ValidationError as SchemaError
from pymongo.database import Database

from studynotion.config import settings
from studynotion.mail.templates.course_enrollment_email import course_enrollment_email
from studynotion.mail.templates.payment_success_email import payment_success_email
from studynotion.models.course_model import CourseProgressDB
from studynotion.models.payment_model import (
    CapturePaymentIn,
    OrderOptions,
    PaymentSuccessEmailIn,
    VerifyPaymentIn,
)
from studynotion.repositories.mongo_repository import MongoRepository, as_ref
from studynotion.repositories.razorpay_repository import RazorpayRepository
from studynotion.utils.errors import ConflictError, InternalError, NotFoundError, ValidationError
from studynotion.utils.mail_sender import MailSender
from studynotion.utils.security import verify_payment_signature

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(
        self,
        db: Optional[Database] = None,
        gateway: Optional[RazorpayRepository] = None,
        mailer: Optional[MailSender] = None,
        secret: Optional[str] = None,
    ) -> None:
        self.courses = MongoRepository("courses", db)
        self.users = MongoRepository("users", db)
        self.progress = MongoRepository("courseprogresses", db)
        self.gateway = gateway or RazorpayRepository()
        self.mailer = mailer or MailSender()
        self.secret = secret if secret is not None else settings.RAZORPAY_SECRET
        try:
            self.progress.col.create_index([("userId", 1), ("courseID", 1)])
        except Exception as e:
            logger.warning(f"[payments] could not create courseprogresses index: {e}")

    # -------------------- internal helpers --------------------
    @staticmethod
    def _receipt() -> str:
        return f"rcpt_{int(time.time() * 1000)}"

    @staticmethod
    def _to_paise(total: float) -> int:
        # half-up rounding
        return int(math.floor(total * 100 + 0.5))

    def _enroll(self, course_id: str, user_id: str) -> Dict[str, Any]:
        # a) roster: $addToSet keeps studentsEnrolled free of duplicates
        course = self.courses.add_to_set(course_id, {"studentsEnrolled": as_ref(user_id)})
        if not course:
            raise NotFoundError("Course not Found")

        # b) a fresh progress record on every verification, even for a repeat
        progress_doc = CourseProgressDB(courseID=str(course_id), userId=str(user_id)).model_dump()
        progress_doc["courseID"] = as_ref(progress_doc["courseID"])
        progress_doc["userId"] = as_ref(progress_doc["userId"])
        progress = self.progress.create(progress_doc)

        # c) user side of the enrollment
        self.users.add_to_set(
            user_id,
            {"courses": as_ref(course_id), "courseProgress": ObjectId(progress["_id"])},
        )

        # d) notification is best-effort
        try:
            user = self.users.find_one(user_id)
            if not user:
                raise LookupError(f"user {user_id} not found")
            self.mailer.send(
                user["email"],
                f"Successfully Enrolled into {course.get('courseName')}",
                course_enrollment_email(course.get("courseName"), user.get("firstName")),
            )
        except Exception as e:
            logger.warning(f"[payments.verify] Enrollment email failed: {e}")

        logger.info(f"[payments.verify] user {user_id} enrolled in course {course_id}")
        return course

    # -------------------- API --------------------
    def capture(self, payload: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        try:
            data = CapturePaymentIn(**(payload or {}))
        except SchemaError:
            raise ValidationError("Please provide course IDs")

        total_amount = 0.0
        for course_id in data.courses:
            course = self.courses.find_one(course_id)
            if not course:
                raise NotFoundError("Course not found")

            # an already-enrolled course cannot be bought again
            if str(user_id) in (course.get("studentsEnrolled") or []):
                raise ConflictError("Student is already Enrolled")

            total_amount += float(course.get("price") or 0)

        options = OrderOptions(amount=self._to_paise(total_amount), currency="INR", receipt=self._receipt())
        order = self.gateway.create_order(options.model_dump())
        logger.info(f"[payments.capture] order {order.get('id')} for user {user_id}, amount {options.amount}")
        return order

    def verify(self, payload: Dict[str, Any], user_id: str) -> None:
        try:
            data = VerifyPaymentIn(**(payload or {}))
        except SchemaError:
            raise ValidationError("Payment Failed")

        try:
            valid = verify_payment_signature(
                self.secret, data.razorpay_order_id, data.razorpay_payment_id, data.razorpay_signature
            )
        except ValueError as e:
            raise InternalError(str(e))
        if not valid:
            logger.warning(f"[payments.verify] invalid signature for order {data.razorpay_order_id}")
            raise ValidationError("Invalid payment signature")

        # one course at a time; a failure leaves earlier courses enrolled
        for course_id in data.courses:
            self._enroll(course_id, user_id)

    def send_success_email(self, payload: Dict[str, Any], user_id: str) -> None:
        if not user_id:
            raise ValidationError("Please provide all the fields")
        try:
            data = PaymentSuccessEmailIn(**(payload or {}))
        except SchemaError:
            raise ValidationError("Please provide all the fields")

        user = self.users.find_one(user_id)
        if not user:
            raise NotFoundError("User not found")

        rupees = data.amount / 100
        if rupees.is_integer():
            rupees = int(rupees)

        self.mailer.send(
            user["email"],
            "Payment Received",
            payment_success_email(user.get("firstName"), rupees, data.orderId, data.paymentId),
        )
