"""
TheDogAPI client: random images and the favourites CRUD calls.

All requests carry the static API key in the x-api-key header. Payloads are
decoded into `thedog.domain.models` records; failures surface as DogAPIError
subclasses. No retries and no caching.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator
from urllib.parse import quote, urlsplit

import requests

from thedog.domain.models import DogImage, FavoriteRecord, decode_list
from thedog.utils.config import dog_api_base_url, dog_api_key, dog_api_timeout
from thedog.utils.logger import get_logger

logger = get_logger()

ADD_FAVORITE_OK = (200, 201)
DELETE_FAVORITE_OK = 200


class DogAPIError(RuntimeError):
    """Base class for every error raised by DogImageClient."""


class InvalidRequestError(DogAPIError):
    """Raised when a request URL cannot be built from the configuration or arguments."""


class ServiceError(DogAPIError):
    """Raised on a non-success status, an empty result, or a transport failure."""


class DecodingError(DogAPIError):
    """Raised when a response body is not JSON of the expected shape."""


class DogImageClient:
    """
    Stateless wrapper around the dog image service.

    Construct one at startup and hand it to whatever needs it. Arguments left
    as None are read from `thedog.utils.config`.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key or dog_api_key()
        self.base_url = (base_url or dog_api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else dog_api_timeout()

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    def _url(self, *segments: str) -> str:
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidRequestError(f"Invalid API base URL: {self.base_url!r}")
        if any(not s for s in segments):
            raise InvalidRequestError("Request path contains an empty segment")
        return "/".join([self.base_url, *(quote(s, safe="") for s in segments)])

    def _request(self, method: str, url: str, payload: dict[str, Any] | None = None) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            return requests.request(
                method,
                url,
                headers=self._headers(),
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Dog API %s %s failed: %s", method, url, e)
            raise ServiceError(f"Request failed: {type(e).__name__}: {e}") from e

    @staticmethod
    def _decode(response: requests.Response, decoder: Callable[[Any], Any], what: str) -> Any:
        try:
            return decoder(response.json())
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError too
            logger.warning(
                "Could not decode %s (status %s): %s",
                what,
                getattr(response, "status_code", None),
                e,
            )
            raise DecodingError(f"Could not decode {what}: {e}") from e

    def fetch_random_image(self) -> DogImage:
        """
        Fetch one random image.

        Raises:
            InvalidRequestError: If the search URL cannot be built.
            ServiceError: If no image is returned or the request fails.
            DecodingError: If the body is not an array of image objects.
        """
        url = self._url("images", "search")
        r = self._request("GET", url)
        images = self._decode(r, lambda d: decode_list(d, DogImage.from_dict, "images"), "image search")
        if not images:
            raise ServiceError("No dog image returned")
        logger.info("Fetched random image %s", images[0].id)
        return images[0]

    def add_favorite(self, image_id: str) -> None:
        """
        Mark an image as a favourite on the service.

        Raises:
            ServiceError: If image_id is empty, the status is not 200/201 or the request fails.
        """
        if not image_id:
            logger.warning("Add favourite called without an image id")
            raise ServiceError("Failed to add to favorites")
        url = self._url("favourites")
        r = self._request("POST", url, {"image_id": image_id})
        if r.status_code not in ADD_FAVORITE_OK:
            logger.warning("Add favourite for %s returned status %s", image_id, r.status_code)
            raise ServiceError("Failed to add to favorites")
        logger.info("Added image %s to favourites", image_id)

    def iter_favorites(self) -> Iterator[DogImage]:
        """
        Yield favourite images one at a time, in listing order.

        Each yielded image carries the id of its favourite record in
        `favorite_id`. An image whose details fail to decode is skipped without
        raising. Failures of the listing request itself, and transport failures
        of any detail request, propagate.
        """
        url = self._url("favourites")
        r = self._request("GET", url)
        records = self._decode(r, lambda d: decode_list(d, FavoriteRecord.from_dict, "favourites"), "favourites")
        for fav in records:
            try:
                image_url = self._url("images", fav.image_id)
            except InvalidRequestError as e:
                logger.warning("Skipping favourite %s: %s", fav.id, e)
                continue
            ir = self._request("GET", image_url)
            try:
                image = self._decode(ir, DogImage.from_dict, f"image {fav.image_id}")
            except DecodingError:
                logger.warning("Skipping favourite %s: image %s did not decode", fav.id, fav.image_id)
                continue
            yield image.with_favorite_id(fav.id)

    def list_favorites(self) -> list[DogImage]:
        """Return all favourite images with full details. See iter_favorites for the skip rules."""
        images = list(self.iter_favorites())
        logger.info("Loaded %d favourite images", len(images))
        return images

    def delete_favorite(self, favorite_id: int) -> None:
        """
        Delete a favourite record (by record id, not image id).

        Raises:
            ServiceError: Unless the service answers exactly 200, or if the request fails.
        """
        url = self._url("favourites", str(favorite_id))
        r = self._request("DELETE", url)
        if r.status_code != DELETE_FAVORITE_OK:
            logger.warning("Delete favourite %s returned status %s", favorite_id, r.status_code)
            raise ServiceError("Failed to delete favorite")
        logger.info("Deleted favourite %s", favorite_id)
