"""Error taxonomy for the link shortener."""


class ShortLinkError(Exception):
    """Base class for all shortlink errors."""


class ValidationError(ShortLinkError, ValueError):
    """Missing or unrecognized request input. Surfaced to callers as a 4xx."""


class NotFoundError(ShortLinkError, LookupError):
    """No link matches the requested short code."""


class InternalError(ShortLinkError, RuntimeError):
    """Digest or store failure. Indicates an environment problem, not a user mistake."""
