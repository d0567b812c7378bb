import hashlib
import hmac
from collections import Counter

import pytest

from studynotion.utils.security import payment_signature, verify_payment_signature
from studynotion.utils.selection import random_index


class TestPaymentSignature:
    def test_matches_hmac_sha256_of_order_and_payment(self):
        expected = hmac.new(b"secret", b"order_1|pay_1", hashlib.sha256).hexdigest()
        assert payment_signature("secret", "order_1", "pay_1") == expected

    def test_verify_accepts_valid_signature(self):
        sig = payment_signature("secret", "order_1", "pay_1")
        assert verify_payment_signature("secret", "order_1", "pay_1", sig) is True

    def test_verify_rejects_other_secret(self):
        sig = payment_signature("other", "order_1", "pay_1")
        assert verify_payment_signature("secret", "order_1", "pay_1", sig) is False

    def test_verify_rejects_uppercase_hex(self):
        sig = payment_signature("secret", "order_1", "pay_1").upper()
        assert verify_payment_signature("secret", "order_1", "pay_1", sig) is False

    def test_verify_handles_non_ascii_signature(self):
        assert verify_payment_signature("secret", "order_1", "pay_1", "ñ" * 64) is False

    def test_verify_requires_secret(self):
        with pytest.raises(ValueError):
            verify_payment_signature("", "order_1", "pay_1", "abc")


class TestRandomIndex:
    def test_single_candidate(self):
        assert all(random_index(1) == 0 for _ in range(20))

    def test_stays_in_range_and_covers_it(self):
        draws = Counter(random_index(4) for _ in range(2000))
        assert set(draws) == {0, 1, 2, 3}

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_empty_range(self, count):
        with pytest.raises(ValueError):
            random_index(count)
