"""Offline validation of license keys."""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .errors import (
    Base64Error,
    ExpiredError,
    InvalidDataError,
    InvalidFormatError,
    InvalidSignatureError,
)
from .generator import LICENSE_PREFIX

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_B64_ALPHABET = re.compile(r"[A-Za-z0-9_-]")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class LicenseInfo:
    """Details of a license key that passed validation."""

    is_valid: bool
    issued_at: datetime
    expires_at: datetime
    hours_remaining: float


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _decode_base64(encoded: str) -> bytes:
    """Strictly decode unpadded URL-safe base64."""
    for offset, char in enumerate(encoded):
        if not _B64_ALPHABET.fullmatch(char):
            raise Base64Error(f"Invalid symbol {ord(char)}, offset {offset}.")
    if len(encoded) % 4 == 1:
        raise Base64Error("Invalid input length.")
    data = base64.urlsafe_b64decode(encoded + "=" * (-len(encoded) % 4))
    if base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii") != encoded:
        last = len(encoded) - 1
        raise Base64Error(f"Invalid last symbol {ord(encoded[last])}, offset {last}.")
    return data


def _parse_i64(text: str) -> int:
    if not text:
        raise InvalidDataError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise InvalidDataError("invalid digit found in string")
    value = int(text)
    if value > _INT64_MAX:
        raise InvalidDataError("number too large to fit in target type")
    if value < _INT64_MIN:
        raise InvalidDataError("number too small to fit in target type")
    return value


def _from_timestamp(seconds: int, what: str) -> datetime:
    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        raise InvalidDataError(f"Invalid {what} timestamp") from None


class LicenseValidator:
    """Checks license keys against the secret used to sign them."""

    def __init__(self, secret_key: str) -> None:
        self.secret_key = str(secret_key)

    def validate_key(self, license_key: str) -> LicenseInfo:
        """Validate ``license_key`` against the current time."""
        return self.validate_key_at_time(license_key, datetime.now(timezone.utc))

    def validate_key_at_time(self, license_key: str, current_time: datetime) -> LicenseInfo:
        """Validate ``license_key`` as if the time were ``current_time``."""
        if not license_key.startswith(LICENSE_PREFIX):
            raise InvalidFormatError()

        data = _decode_base64(license_key[len(LICENSE_PREFIX):])

        payload, separator, provided_signature = data.partition(b".")
        if not separator:
            raise InvalidFormatError()

        expected = hmac.new(
            self.secret_key.encode("utf-8"), payload, hashlib.sha256
        ).digest()
        if not hmac.compare_digest(expected, provided_signature):
            raise InvalidSignatureError()

        try:
            payload_text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidDataError(str(exc)) from None

        parts = payload_text.split(":")
        if len(parts) != 2:
            raise InvalidFormatError()

        issued_at = _from_timestamp(_parse_i64(parts[0]), "issued")
        expires_at = _from_timestamp(_parse_i64(parts[1]), "expires")

        now = _as_utc(current_time)
        if not now < expires_at:
            raise ExpiredError()

        minutes = (expires_at - now) // timedelta(minutes=1)
        return LicenseInfo(
            is_valid=True,
            issued_at=issued_at,
            expires_at=expires_at,
            hours_remaining=minutes / 60.0,
        )