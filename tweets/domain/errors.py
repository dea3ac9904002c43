"""Domain errors raised by the stores and the calling layer."""


class TweetsError(Exception):
    """Base class for all service errors."""
    
    http_status = 500


class StorageUnavailable(TweetsError):
    """The backing connection cannot be established or used."""
    
    http_status = 503


class ValidationError(TweetsError):
    """Input rejected by the calling layer (empty text, malformed id, ...)."""
    
    http_status = 400
