"""Generate and validate time-based, HMAC-signed license keys offline."""

__version__ = "0.1.0"