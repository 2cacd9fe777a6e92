"""Interactive terminal tool for generating and validating license keys."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .errors import (
    Base64Error,
    ExpiredError,
    InvalidDataError,
    InvalidFormatError,
    InvalidSignatureError,
    LicenseError,
    TimeParseError,
)
from .generate import _parse_u64
from .generator import LicenseGenerator
from .validator import LicenseValidator

_DEFAULT_SECRET = "secret"
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
_MIN_SECRET_LENGTH = 8

_DURATION_CHOICES = {"1": 1, "2": 24, "3": 168, "4": 720, "5": 8760}


def _ask(prompt: str) -> str:
    """Read one trimmed line after showing ``prompt``; raises EOFError at end of input."""
    return input(prompt).strip()


def _failure_reason(error: LicenseError) -> str:
    if isinstance(error, ExpiredError):
        return "   🕒 Reason: License has expired"
    if isinstance(error, InvalidSignatureError):
        return "   🔑 Reason: Invalid signature (wrong secret key or tampered key)"
    if isinstance(error, InvalidFormatError):
        return "   📝 Reason: Invalid license key format"
    if isinstance(error, InvalidDataError):
        return f"   📊 Reason: Invalid data - {error.detail}"
    if isinstance(error, Base64Error):
        return "   🔤 Reason: Base64 decoding error"
    if isinstance(error, TimeParseError):
        return "   📅 Reason: Time parsing error"
    return f"   Reason: {error}"


def _choose_secret() -> str:
    print("🔐 Secret Key Configuration")
    print("1. Use default secret key (recommended for testing)")
    print("2. Enter custom secret key")
    choice = _ask("Choose option (1-2): ")

    if choice == "1":
        print("✅ Using default secret key")
        return _DEFAULT_SECRET
    if choice == "2":
        custom = _ask("Enter your secret key: ")
        if not custom:
            print("⚠️  Empty secret key provided, using default instead")
            return _DEFAULT_SECRET
        if len(custom.encode("utf-8")) < _MIN_SECRET_LENGTH:
            print(
                "⚠️  Secret key is very short (less than 8 characters). "
                "Consider using a longer key for better security."
            )
        else:
            print("✅ Using custom secret key")
        return custom

    print("❌ Invalid choice, using default secret key")
    return _DEFAULT_SECRET


def _choose_hours() -> int:
    while True:
        print("\n⏰ License Duration Options:")
        print("1. 1 hour")
        print("2. 24 hours (1 day)")
        print("3. 168 hours (1 week)")
        print("4. 720 hours (30 days)")
        print("5. 8760 hours (1 year)")
        print("6. Custom duration")
        choice = _ask("Choose duration (1-6): ")

        if choice in _DURATION_CHOICES:
            return _DURATION_CHOICES[choice]
        if choice == "6":
            try:
                hours = _parse_u64(_ask("Enter custom duration in hours: "))
            except ValueError:
                print("❌ Invalid number format")
                continue
            if hours > 0:
                return hours
            print("❌ Duration must be greater than 0")
        else:
            print("❌ Invalid choice. Please enter 1-6.")


def _generate() -> None:
    print("\n🔧 License Key Generation")
    print("-------------------------")

    signing_key = _choose_secret()
    hours = _choose_hours()

    try:
        license_key = LicenseGenerator(signing_key).generate_key(hours)
        expires_at = datetime.now(timezone.utc) + timedelta(hours=hours)
    except (LicenseError, ValueError, OverflowError) as exc:
        print(f"❌ Failed to generate license key: {exc}")
        return

    source = "default" if signing_key == _DEFAULT_SECRET else "custom"
    print("\n✅ License key generated successfully!")
    print(f"📋 License Key: {license_key}")
    print(f"⏰ Valid for: {hours} hours")
    print(f"🔑 Secret used: {source}")
    print(f"📅 Expires at: {expires_at.strftime(_TIME_FORMAT)}")


def _validate() -> None:
    print("\n🔍 License Key Validation")
    print("-------------------------")

    license_key = _ask("Enter the license key to validate: ")
    if not license_key:
        print("❌ License key cannot be empty!")
        return

    print()
    signing_key = _choose_secret()

    try:
        info = LicenseValidator(signing_key).validate_key(license_key)
    except LicenseError as exc:
        print("\n❌ License key validation FAILED!")
        print(_failure_reason(exc))
        return

    print("\n✅ License key is VALID!")
    print("📊 License Information:")
    print(f"   📅 Issued at: {info.issued_at.strftime(_TIME_FORMAT)}")
    print(f"   ⏰ Expires at: {info.expires_at.strftime(_TIME_FORMAT)}")
    print(f"   🕒 Hours remaining: {info.hours_remaining:.2f}")
    print("   ✅ Status: Active")


def main(argv=None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    print("🔐 Alvan License Key Manager")
    print("==============================")

    actions = {"1": _generate, "2": _validate}
    try:
        while True:
            print("\nWhat would you like to do?")
            print("1. Generate a new license key")
            print("2. Validate an existing license key")
            print("3. Exit")
            choice = _ask("\nEnter your choice (1-3): ")

            if choice == "3":
                print("👋 Goodbye!")
                return 0
            action = actions.get(choice)
            if action is None:
                print("❌ Invalid choice. Please enter 1, 2, or 3.")
            else:
                action()
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())