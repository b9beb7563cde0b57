"""Core constants: glob markers, S3 limits, and error codes shared by the cache."""

# A key containing this marker is treated as a glob pattern by delete()
WILDCARD = "*"

# Characters that start a glob construct (literal prefix ends before the first)
GLOB_METACHARS = frozenset("*?[")

# S3 DeleteObjects accepts at most 1000 keys per request
DELETE_BATCH_SIZE = 1000

# Error codes S3-compatible stores use for a missing object
NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})

JSON_CONTENT_TYPE = "application/json"
