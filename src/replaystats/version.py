"""Package and report schema versions.

Reports carry ``schema_version`` (MAJOR.MINOR.PATCH). A report is readable by
this package when its major version matches; minor and patch bumps only add
fields or clarify existing ones.
"""

SCHEMA_VERSION = "1.0.0"
PACKAGE_VERSION = "0.1.0"


def get_schema_version() -> str:
    return SCHEMA_VERSION


def get_package_version() -> str:
    return PACKAGE_VERSION


def _major(version: str) -> str | None:
    parts = version.split(".")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return None
    return parts[0]


def is_schema_compatible(version: str) -> bool:
    """True if ``version`` shares the current schema's major version."""
    if not isinstance(version, str):
        return False
    major = _major(version)
    return major is not None and major == _major(SCHEMA_VERSION)
