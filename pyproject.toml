[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alvan-lic"
version = "0.1.0"
description = "Generate and validate time-based license keys offline, signed with HMAC-SHA256"
requires-python = ">=3.10"
dependencies = []
keywords = ["license", "key", "validation", "generator", "offline", "hmac"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alvan-cli = "alvan_lic.cli:main"
alvan-generate-key = "alvan_lic.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["alvan_lic"]

[tool.pytest.ini_options]
addopts = "-ra"
