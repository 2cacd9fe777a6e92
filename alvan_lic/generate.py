"""Command that prints a license key for a secret and a number of hours."""

from __future__ import annotations

import os
import re
import sys

from .errors import LicenseError
from .generator import LicenseGenerator

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit integer, raising ValueError on anything else."""
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def main(argv=None) -> int:
    """Print a license key; return 0 on success and 1 on bad usage or failure."""
    args = sys.argv[1:] if argv is None else list(argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "generate"

    if len(args) != 2:
        print(f"Usage: {program} <secret_key> <hours>")
        print(f"Example: {program} my-secret-key 24")
        return 1

    secret, hours_text = args
    try:
        hours = _parse_u64(hours_text)
    except ValueError:
        print(f"Error: Invalid number of hours '{hours_text}'")
        return 1

    try:
        license_key = LicenseGenerator(secret).generate_key(hours)
    except (LicenseError, ValueError, OverflowError) as exc:
        print(f"Error generating license: {exc}", file=sys.stderr)
        return 1

    print(license_key)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())