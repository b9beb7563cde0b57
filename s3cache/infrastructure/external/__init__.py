"""External collaborators: object storage."""
