# alvan-lic

Time-limited license keys that can be checked offline.

A key records when it was issued and when it expires, as whole Unix seconds,
and carries an HMAC-SHA256 signature over both timestamps. Anyone who holds
the same secret can check a key without contacting a server. Every key starts
with `alvan-`, followed by URL-safe base64 without padding.

## Installation

```
pip install alvan-lic
```

The package needs Python 3.10 or later and uses only the standard library.

## Library use

```python
from alvan_lic.generator import LicenseGenerator
from alvan_lic.validator import LicenseValidator
from alvan_lic.errors import ExpiredError, InvalidSignatureError, LicenseError

secret = "secret"

generator = LicenseGenerator(secret)
key = generator.generate_key(24)          # valid for 24 hours from now

validator = LicenseValidator(secret)
info = validator.validate_key(key)
print(info.is_valid)                       # True
print(info.issued_at, info.expires_at)     # timezone-aware UTC datetimes
print(f"{info.hours_remaining:.2f} hours left")
```

`generate_key` takes a whole, non-negative number of hours; anything that is
not an `int` raises `TypeError`, and a negative number raises `ValueError`.

`validate_key` returns a frozen `LicenseInfo` dataclass with `is_valid`,
`issued_at`, `expires_at` and `hours_remaining`. The remaining time is counted
in whole minutes and given in hours, so it moves in steps of 1/60.

When validation fails, an exception is raised. Each kind of failure has its
own subclass of `LicenseError`:

| Exception               | Raised when                                              |
|-------------------------|----------------------------------------------------------|
| `InvalidFormatError`    | the `alvan-` prefix is missing or the payload is malformed |
| `Base64Error`           | the part after the prefix is not valid unpadded URL-safe base64 |
| `InvalidSignatureError` | the secret is wrong or the key was altered               |
| `InvalidDataError`      | the signed payload does not hold usable timestamps       |
| `ExpiredError`          | the expiry time is not after the time of checking        |

`errors` also defines `TimeParseError` for callers that need it; validation
itself does not raise it.

```python
try:
    validator.validate_key(key)
except ExpiredError:
    print("license has expired")
except InvalidSignatureError:
    print("wrong secret or tampered key")
except LicenseError as exc:
    print(f"invalid license: {exc}")
```

To work with fixed times, for example in tests, use
`LicenseGenerator.generate_key_with_timestamp(hours, issued_at)` and
`LicenseValidator.validate_key_at_time(license_key, current_time)`. Both take
`datetime` values; a naive `datetime` is taken to be UTC.

## Command-line tools

Print a new key for a secret and a number of hours:

```
alvan-generate-key secret 24
```

With the wrong number of arguments it prints a usage line, and with an hours
value that is not a non-negative whole number it prints an error; in both cases
it exits with status 1.

Generate and check keys through an interactive menu:

```
alvan-cli
```

The menu asks you to pick a secret (a built-in default for testing, or one of
your own; an empty entry falls back to the default, and a secret shorter than
8 bytes draws a warning) and a duration (one hour, one day, one week, thirty
days, one year, or any positive number of hours). For a key you enter, it
prints when the key was issued, when it expires and how many hours remain, or
the reason it was rejected. Choose 3, or end the input, to leave.

## What it does not do

Keys are signed, not encrypted: anyone can decode the issue and expiry times
from a key. There is no revocation list, no binding of a key to a user or a
machine, and no storage of issued keys; a key stays valid until it expires for
anyone holding it and the secret.

## Running the tests

```
pip install -e ".[test]"
pytest
```