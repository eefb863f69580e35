"""Exceptions raised by the MiCoach MCP Server."""


class CoachingError(Exception):
    """Base class for coaching errors."""


class StorageError(CoachingError):
    """A record could not be persisted."""


class RecordEncodeError(StorageError):
    """A record could not be serialized before writing."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Could not encode record for '{key}': {reason}")


class StorageWriteError(StorageError):
    """Writing a serialized record to the data directory failed."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Could not write '{key}': {reason}")
