import hmac
import hashlib


def payment_signature(secret: str, order_id: str, payment_id: str) -> str:
    """Hex HMAC-SHA256 of ``order_id|payment_id``, as Razorpay signs payments."""
    body = f"{order_id}|{payment_id}"
    return hmac.new(secret.encode("utf-8"), body.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_payment_signature(secret: str, order_id: str, payment_id: str, signature: str) -> bool:
    if not secret:
        raise ValueError("Payment signature secret is not configured")
    expected = payment_signature(secret, order_id, payment_id)
    return hmac.compare_digest(expected.encode("utf-8"), str(signature).encode("utf-8"))
