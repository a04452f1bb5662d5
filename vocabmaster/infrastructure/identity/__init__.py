"""Identity infrastructure layer: verifying externally issued access tokens."""

from vocabmaster.infrastructure.identity.dependencies import get_current_user_id, oauth2_scheme

__all__ = [
    "get_current_user_id",
    "oauth2_scheme",
]
