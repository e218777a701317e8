"""IO and integration code: the HTTP client for the dog image service."""

from thedog.infrastructure.dog_api_client import (
    DecodingError,
    DogAPIError,
    DogImageClient,
    InvalidRequestError,
    ServiceError,
)

__all__ = [
    "DecodingError",
    "DogAPIError",
    "DogImageClient",
    "InvalidRequestError",
    "ServiceError",
]
