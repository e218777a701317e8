"""Domain layer (records decoded from the dog image service).

Domain modules do no IO. The client in `thedog.infrastructure` decodes payloads
into these records and maps their decoding failures to its own error types.
"""

from thedog.domain.models import Breed, DogImage, FavoriteRecord, Weight

__all__ = ["Breed", "DogImage", "FavoriteRecord", "Weight"]
