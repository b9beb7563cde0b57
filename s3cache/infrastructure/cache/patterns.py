"""Glob helpers for pattern deletes.

Matching uses shell-glob semantics via fnmatch.fnmatchcase: "*" matches
any run of characters (including "/", so patterns span key hierarchy),
"?" one character, and "[...]" / "[!...]" character classes.
Matching is case-sensitive, like S3 keys.
"""

from fnmatch import fnmatchcase

from s3cache.core.constants import GLOB_METACHARS, WILDCARD


def is_pattern(key: str) -> bool:
    """Return True if delete() should treat key as a glob pattern."""
    return WILDCARD in key


def literal_prefix(pattern: str) -> str:
    """Return the fixed part of pattern before its first glob metacharacter.

    Used as the S3 listing prefix so only candidate keys are scanned.

    Args:
        pattern: Glob pattern (e.g. "users/*/profile").

    Returns:
        Literal prefix (e.g. "users/"); empty string for "*".
    """
    for index, char in enumerate(pattern):
        if char in GLOB_METACHARS:
            return pattern[:index]
    return pattern


def matches(pattern: str, key: str) -> bool:
    """Return True if key matches the glob pattern."""
    return fnmatchcase(key, pattern)
