"""Exceptions raised while generating or validating license keys."""


class LicenseError(Exception):
    """Base class for every license-related failure."""


class InvalidFormatError(LicenseError):
    """The license key does not have the expected structure."""

    def __init__(self) -> None:
        super().__init__("Invalid license format")


class InvalidSignatureError(LicenseError):
    """The signature does not match the payload for the given secret."""

    def __init__(self) -> None:
        super().__init__("Invalid license signature")


class ExpiredError(LicenseError):
    """The license's expiry time has passed."""

    def __init__(self) -> None:
        super().__init__("License has expired")


class InvalidDataError(LicenseError):
    """The signed payload is present but its contents cannot be used."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid license data: {detail}")


class Base64Error(LicenseError):
    """The encoded part of the key is not valid unpadded URL-safe base64."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Base64 decoding error: {detail}")


class TimeParseError(LicenseError):
    """A time value could not be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Time parsing error: {detail}")