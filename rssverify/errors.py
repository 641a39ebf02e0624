"""Exceptions raised by the I/O collaborators around the validation core."""


class RSSVerifyError(Exception):
    """Base class for verifier failures that end a file's (or the run's) check."""


class DiscoveryError(RSSVerifyError):
    """The feed directory tree could not be walked."""


class FeedReadError(RSSVerifyError):
    """A feed file could not be read from disk."""


class DocumentParseError(RSSVerifyError):
    """Raw bytes are not valid XML or do not have the shape of an RSS feed."""
