"""
Custom exceptions for the external API layer.

Services raise these internally and convert them to an explicit absence
(``None``, ``False`` or ``LookupStatus.ERROR``) at their public boundary.
"""

from typing import Optional


class ProviderError(Exception):
    """Base exception for errors talking to an external provider."""
    pass

class TransportError(ProviderError):
    """Raised when a request could not be completed (connection, timeout, DNS)."""
    def __init__(self, url: str, details: str):
        super().__init__(f"Request to {url} failed: {details}")

class UnexpectedResponseError(ProviderError):
    """Raised when a response arrived but does not match the expected envelope."""
    def __init__(self, url: str, reason: str, status: Optional[int] = None):
        super().__init__(f"Unexpected response from {url} (status {status}): {reason}")

class DeserializationError(ProviderError):
    """Raised when a response body does not parse into the expected structure."""
    def __init__(self, entity: str, reason: str):
        super().__init__(f"Failed to deserialize {entity}: {reason}")
        self.entity = entity

class EntityValidationError(ProviderError):
    """Raised when a parsed entity does not match the requested key."""
    def __init__(self, entity: str, requested, received):
        super().__init__(f"{entity} mismatch: requested {requested!r}, received {received!r}")

class SortOptionNotFoundError(LookupError):
    """Raised when a sort option id is not part of the registry."""
    def __init__(self, sort_id: str):
        super().__init__(f"Unknown sort option '{sort_id}'")
        self.sort_id = sort_id
        self.user_message = f"❌ `{sort_id}` is not a valid sort option!"
