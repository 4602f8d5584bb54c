"""Store-specific exceptions."""


class StoreError(Exception):
    """Base exception for data file store failures."""


class RootUnavailable(StoreError):
    """The store root directory cannot be resolved or created."""


class SourceMissing(StoreError):
    """A source file to be copied into the store does not exist."""


class InvalidName(StoreError):
    """A file name is empty or has no usable file name component."""


class IoFailure(StoreError):
    """An underlying read, write, copy or delete failed."""


class PathEscapesRoot(StoreError):
    """A name resolves to a location outside the store root."""
