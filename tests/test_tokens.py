import time
import unittest

from jose import jwt

from autocare_console.tokens import (
    get_decoded_token, get_time_until_expiration, get_user_from_token, is_token_valid,
)


def make_token(expires_in=3600, **claims):
    payload = {"sub": "ravi@example.com", "iat": int(time.time()), "exp": int(time.time()) + expires_in}
    payload.update(claims)
    return jwt.encode(payload, "secret", algorithm="HS256")


class TestTokens(unittest.TestCase):

    def test_valid_token(self):
        self.assertTrue(is_token_valid(make_token()))

    def test_expired_token(self):
        token = make_token(expires_in=-60)

        self.assertFalse(is_token_valid(token))
        with self.assertLogs("autocare_console.tokens", level="WARNING"):
            self.assertIsNone(get_decoded_token(token))
        self.assertIsNone(get_time_until_expiration(token))

    def test_missing_or_malformed_token(self):
        self.assertFalse(is_token_valid(None))
        self.assertFalse(is_token_valid(""))
        with self.assertLogs("autocare_console.tokens", level="ERROR"):
            self.assertFalse(is_token_valid("not-a-token"))

    def test_decoded_claims(self):
        token = make_token(userId=4, componentNames=["Vehicles", "Stock"], roles=["ADMIN"])

        decoded = get_decoded_token(token)

        self.assertEqual(decoded.user_id, 4)
        self.assertEqual(decoded.component_names, ["Vehicles", "Stock"])

    def test_user_from_token(self):
        user = get_user_from_token(make_token(firstname="Ravi", roles=["ADMIN"]))

        self.assertTrue(user.is_authenticated)
        self.assertEqual(user.name, "Ravi")
        self.assertEqual(user.role, "ADMIN")

    def test_user_defaults(self):
        user = get_user_from_token(make_token())

        self.assertEqual(user.name, "ravi@example.com")
        self.assertEqual(user.role, "USER")

    def test_anonymous_user(self):
        self.assertFalse(get_user_from_token(None).is_authenticated)

    def test_time_until_expiration(self):
        remaining = get_time_until_expiration(make_token(expires_in=120))

        self.assertGreater(remaining, 100 * 1000)
        self.assertLessEqual(remaining, 120 * 1000)


if __name__ == "__main__":
    unittest.main()
