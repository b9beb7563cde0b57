"""Infrastructure: S3-backed cache, object store client, and exceptions."""
