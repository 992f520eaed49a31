"""Exception types raised by the domain checker."""


class DomainCheckError(Exception):
    """Base class for all domain checker errors."""


class DnsLookupError(DomainCheckError):
    """A single DNS lookup did not return records."""


class NoRecordsFound(DnsLookupError):
    """The name does not exist or has no records of the requested type.

    This is the expected outcome for unregistered domains and is never
    reported as an error.
    """


class LookupFailure(DnsLookupError):
    """The lookup failed for a network, timeout or protocol reason."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(DomainCheckError):
    """No domain names were supplied from any source."""
