"""External service integrations."""
from discography.integrations.itunes import ITunesClient, ITunesError

__all__ = [
    "ITunesClient",
    "ITunesError",
]
