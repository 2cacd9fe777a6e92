import base64
from datetime import datetime, timedelta, timezone

import pytest

from alvan_lic.generator import LICENSE_PREFIX, LicenseGenerator


def _decode(key):
    encoded = key[len(LICENSE_PREFIX):]
    padded = encoded + "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(padded)


def _payload(key):
    data = _decode(key)
    return data[: data.index(b".")].decode("ascii")


def test_generate_key():
    generator = LicenseGenerator("test-secret")
    key = generator.generate_key(24)
    assert key.startswith(LICENSE_PREFIX)
    assert len(key) > len(LICENSE_PREFIX)


def test_different_hours():
    generator = LicenseGenerator("test-secret")
    key1 = generator.generate_key(1)
    key24 = generator.generate_key(24)
    key_year = generator.generate_key(24 * 365)

    assert key1.startswith(LICENSE_PREFIX)
    assert key24.startswith(LICENSE_PREFIX)
    assert key_year.startswith(LICENSE_PREFIX)

    assert key1 != key24
    assert key24 != key_year


def test_prefix_is_alvan():
    key = LicenseGenerator("secret").generate_key(1)
    assert key.startswith("alvan-")
    assert LICENSE_PREFIX == "alvan-"


def test_payload_holds_issue_and_expiry_seconds():
    issued_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    key = LicenseGenerator("secret").generate_key_with_timestamp(2, issued_at)
    issued_text, expires_text = _payload(key).split(":")
    assert int(issued_text) == int(issued_at.timestamp())
    assert int(expires_text) == int((issued_at + timedelta(hours=2)).timestamp())


def test_signature_is_sha256_length():
    issued_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    key = LicenseGenerator("secret").generate_key_with_timestamp(1, issued_at)
    data = _decode(key)
    assert len(data) - data.index(b".") - 1 == 32


def test_encoding_has_no_padding_or_unsafe_chars():
    key = LicenseGenerator("secret").generate_key(5)
    encoded = key[len(LICENSE_PREFIX):]
    assert "=" not in encoded
    assert "+" not in encoded and "/" not in encoded


def test_same_inputs_give_same_key():
    issued_at = datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)
    generator = LicenseGenerator("secret")
    first = generator.generate_key_with_timestamp(24, issued_at)
    second = generator.generate_key_with_timestamp(24, issued_at)
    assert _payload(first) == "1686832200:1686918600"
    assert first == second


def test_different_secrets_give_different_keys():
    issued_at = datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)
    first = LicenseGenerator("secret").generate_key_with_timestamp(24, issued_at)
    second = LicenseGenerator("other").generate_key_with_timestamp(24, issued_at)
    assert first != second
    assert _payload(first) == _payload(second)


def test_naive_timestamp_treated_as_utc():
    aware = datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)
    naive = datetime(2023, 6, 15, 12, 30)
    generator = LicenseGenerator("secret")
    assert generator.generate_key_with_timestamp(3, naive) == (
        generator.generate_key_with_timestamp(3, aware)
    )


def test_subsecond_part_is_dropped():
    base = datetime(2023, 6, 15, 12, 30, tzinfo=timezone.utc)
    generator = LicenseGenerator("secret")
    assert generator.generate_key_with_timestamp(1, base + timedelta(microseconds=999_999)) == (
        generator.generate_key_with_timestamp(1, base)
    )


def test_negative_hours_rejected():
    with pytest.raises(ValueError):
        LicenseGenerator("secret").generate_key(-1)


def test_non_integer_hours_rejected():
    with pytest.raises(TypeError):
        LicenseGenerator("secret").generate_key(1.5)