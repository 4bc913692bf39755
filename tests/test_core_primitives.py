"""Tests for random source, key derivation and AES-GCM primitives."""

from __future__ import annotations

import hashlib
import unittest
from unittest import mock

from filecrypt.core.cipher import open_, seal
from filecrypt.core.kdf import derive_key
from filecrypt.core.random_source import generate_nonce, generate_salt, random_bytes
from filecrypt.utils import (
    AuthenticationFailedError,
    EntropyUnavailableError,
    InvalidParametersError,
)


class TestRandomSource(unittest.TestCase):
    def test_lengths(self) -> None:
        self.assertEqual(len(generate_salt()), 16)
        self.assertEqual(len(generate_nonce()), 12)
        self.assertEqual(random_bytes(0), b"")

    def test_values_differ(self) -> None:
        salts = {generate_salt() for _ in range(100)}
        self.assertEqual(len(salts), 100)

    def test_negative_length_rejected(self) -> None:
        with self.assertRaises(InvalidParametersError):
            random_bytes(-1)

    def test_missing_entropy_source_is_fatal(self) -> None:
        with mock.patch(
            "filecrypt.core.random_source.os.urandom",
            side_effect=NotImplementedError("no source"),
        ) as urandom:
            with self.assertRaises(EntropyUnavailableError):
                random_bytes(16)
        urandom.assert_called_once_with(16)

    def test_short_read_is_fatal(self) -> None:
        with mock.patch(
            "filecrypt.core.random_source.os.urandom", return_value=b"\x00" * 4
        ):
            with self.assertRaises(EntropyUnavailableError):
                random_bytes(16)

    def test_generators_draw_from_given_source(self) -> None:
        source = mock.Mock(side_effect=lambda n: b"\x07" * n)
        self.assertEqual(generate_salt(32, source), b"\x07" * 32)
        self.assertEqual(generate_nonce(16, source), b"\x07" * 16)
        self.assertEqual(source.call_args_list, [mock.call(32), mock.call(16)])


class TestKeyDerivation(unittest.TestCase):
    def setUp(self) -> None:
        self.salt = bytes(range(16))

    def test_matches_hashlib_pbkdf2(self) -> None:
        expected = hashlib.pbkdf2_hmac("sha256", b"secret", self.salt, 1000, 32)
        self.assertEqual(derive_key(b"secret", self.salt, 1000), expected)

    def test_str_and_bytes_passwords_agree(self) -> None:
        self.assertEqual(
            derive_key("pässword", self.salt, 1000),
            derive_key("pässword".encode("utf-8"), self.salt, 1000),
        )
        self.assertEqual(
            derive_key(bytearray(b"pw"), self.salt, 1000),
            derive_key(b"pw", self.salt, 1000),
        )

    def test_salt_and_iterations_change_key(self) -> None:
        base = derive_key(b"pw", self.salt, 1000)
        self.assertNotEqual(base, derive_key(b"pw", bytes(16), 1000))
        self.assertNotEqual(base, derive_key(b"pw", self.salt, 1001))

    def test_invalid_parameters(self) -> None:
        with self.assertRaises(InvalidParametersError):
            derive_key(b"pw", b"short", 1000)
        with self.assertRaises(InvalidParametersError):
            derive_key(b"pw", self.salt, 0)

    def test_custom_salt_length(self) -> None:
        salt = bytes(range(32))
        expected = hashlib.pbkdf2_hmac("sha256", b"pw", salt, 1000, 32)
        self.assertEqual(derive_key(b"pw", salt, 1000, salt_length=32), expected)
        with self.assertRaises(InvalidParametersError):
            derive_key(b"pw", self.salt, 1000, salt_length=32)


class TestAesGcm(unittest.TestCase):
    def setUp(self) -> None:
        self.key = bytes(32)
        self.nonce = bytes(12)

    def test_known_answer_empty_plaintext(self) -> None:
        sealed = seal(self.key, self.nonce, b"")
        self.assertEqual(sealed.hex(), "530f8afbc74536b9a963b4f1c4cb738b")

    def test_known_answer_one_block(self) -> None:
        sealed = seal(self.key, self.nonce, bytes(16))
        self.assertEqual(
            sealed.hex(),
            "cea7403d4d606b6e074ec5d3baf39d18"
            "d0d1c8a799996bf0265b98b5d48ab919",
        )

    def test_seal_open_roundtrip(self) -> None:
        key = bytearray(range(32))
        sealed = seal(key, self.nonce, b"hello world")
        self.assertEqual(len(sealed), len(b"hello world") + 16)
        self.assertEqual(open_(key, self.nonce, sealed), b"hello world")

    def test_tampered_tag_rejected(self) -> None:
        sealed = bytearray(seal(self.key, self.nonce, b"msg"))
        sealed[-1] ^= 0x01
        with self.assertRaises(AuthenticationFailedError):
            open_(self.key, self.nonce, bytes(sealed))

    def test_wrong_nonce_rejected(self) -> None:
        sealed = seal(self.key, self.nonce, b"msg")
        with self.assertRaises(AuthenticationFailedError):
            open_(self.key, b"\x01" + bytes(11), sealed)

    def test_truncated_payload_rejected(self) -> None:
        with self.assertRaises(AuthenticationFailedError):
            open_(self.key, self.nonce, b"\x00" * 15)

    def test_bad_lengths_are_parameter_errors(self) -> None:
        with self.assertRaises(InvalidParametersError):
            seal(bytes(16), self.nonce, b"msg")
        with self.assertRaises(InvalidParametersError):
            seal(self.key, bytes(16), b"msg")
        with self.assertRaises(InvalidParametersError):
            open_(self.key, bytes(8), bytes(32))

    def test_custom_nonce_length(self) -> None:
        nonce = bytes(range(16))
        sealed = seal(self.key, nonce, b"msg", nonce_length=16)
        self.assertEqual(open_(self.key, nonce, sealed, nonce_length=16), b"msg")
        with self.assertRaises(InvalidParametersError):
            open_(self.key, self.nonce, sealed, nonce_length=16)


if __name__ == "__main__":
    unittest.main()
