"""Error taxonomy shared by the server and the client library.

Validation failures are not exceptions: they travel as the ``Rejected``
result from ``celebration.schemas.validation``.
"""


class CelebrationError(Exception):
    """Base class for all application errors."""


class FormatError(CelebrationError):
    """An embedded photo payload is not a well-formed base64 data-URI."""


class StorageUnavailable(CelebrationError):
    """A table or bucket is missing, or an access policy rejected the write."""


class StorageError(CelebrationError):
    """The record store failed for a reason other than unavailability."""


class RemoteFailure(CelebrationError):
    """The remote mirror of a submission did not succeed."""


class TransientFailure(RemoteFailure):
    """The remote call failed at the transport level (network, timeout)."""


class RemoteRejected(RemoteFailure):
    """The remote API answered with a non-success status."""

    def __init__(self, status_code: int, body):
        super().__init__(f"Remote API responded {status_code}")
        self.status_code = status_code
        self.body = body


class AdminLocked(CelebrationError):
    """The admin view was requested before the passphrase was accepted."""
