import unittest

from devmatching.utils.security import (
    BcryptPasswordHasher,
    create_access_token,
    create_refresh_token,
    decode_token,
)


class TestBcryptPasswordHasher(unittest.TestCase):
    def setUp(self):
        self.hasher = BcryptPasswordHasher()

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = self.hasher.hash("pw1")

        self.assertNotEqual(hashed, "pw1")
        self.assertTrue(self.hasher.verify("pw1", hashed))
        self.assertFalse(self.hasher.verify("pw2", hashed))

    def test_same_password_gets_different_salt(self):
        self.assertNotEqual(self.hasher.hash("pw1"), self.hasher.hash("pw1"))

    def test_long_multibyte_password_is_truncated_on_char_boundary(self):
        password = "가" * 40  # 120 bytes
        hashed = self.hasher.hash(password)

        self.assertTrue(self.hasher.verify(password, hashed))
        self.assertTrue(self.hasher.verify("가" * 24, hashed))
        self.assertFalse(self.hasher.verify("가" * 23, hashed))

    def test_password_over_72_bytes_with_split_character(self):
        password = "a" + "가" * 30  # 72번째 바이트가 "가"의 중간
        hashed = self.hasher.hash(password)

        self.assertTrue(self.hasher.verify(password, hashed))
        self.assertTrue(self.hasher.verify("a" + "가" * 23, hashed))


class TestTokens(unittest.TestCase):
    def test_access_token_round_trip(self):
        payload = decode_token(create_access_token(sub="alice"))

        self.assertEqual(payload["sub"], "alice")
        self.assertEqual(payload["scope"], "access")
        self.assertIn("exp", payload)

    def test_refresh_token_scope(self):
        payload = decode_token(create_refresh_token(sub="alice"))

        self.assertEqual(payload["scope"], "refresh")

    def test_invalid_token_decodes_to_none(self):
        self.assertIsNone(decode_token("not-a-jwt"))


if __name__ == "__main__":
    unittest.main()
