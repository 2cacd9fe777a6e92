"""Creation of signed, time-limited license keys."""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import datetime, timedelta, timezone

LICENSE_PREFIX = "alvan-"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECONDS_PER_HOUR = 3600


def _unix_seconds(moment: datetime) -> int:
    """Whole seconds since the Unix epoch, rounding down; naive times are UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(seconds=1)


def _sign(secret_key: str, payload: bytes) -> bytes:
    return hmac.new(secret_key.encode("utf-8"), payload, hashlib.sha256).digest()


class LicenseGenerator:
    """Issues license keys signed with HMAC-SHA256 under a secret key."""

    def __init__(self, secret_key: str) -> None:
        self.secret_key = str(secret_key)

    def generate_key(self, hours: int) -> str:
        """Return a key valid for ``hours`` hours from now."""
        return self.generate_key_with_timestamp(hours, datetime.now(timezone.utc))

    def generate_key_with_timestamp(self, hours: int, issued_at: datetime) -> str:
        """Return a key issued at ``issued_at`` and valid for ``hours`` hours."""
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise TypeError("hours must be an integer")
        if hours < 0:
            raise ValueError("hours must not be negative")

        issued = _unix_seconds(issued_at)
        expires = issued + hours * _SECONDS_PER_HOUR
        payload = f"{issued}:{expires}".encode("ascii")

        data = payload + b"." + _sign(self.secret_key, payload)
        encoded = base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
        return LICENSE_PREFIX + encoded