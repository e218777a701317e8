"""thedog: client for TheDogAPI random images and favourites."""

from thedog.domain.models import Breed, DogImage, FavoriteRecord, Weight
from thedog.infrastructure.dog_api_client import (
    DecodingError,
    DogAPIError,
    DogImageClient,
    InvalidRequestError,
    ServiceError,
)

__version__ = "0.1.0"

__all__ = [
    "Breed",
    "DecodingError",
    "DogAPIError",
    "DogImage",
    "DogImageClient",
    "FavoriteRecord",
    "InvalidRequestError",
    "ServiceError",
    "Weight",
]
