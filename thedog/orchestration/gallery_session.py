"""
Like/skip and favourites state for a single-screen dog gallery.
"""

from __future__ import annotations

from thedog.domain.models import DogImage
from thedog.infrastructure.dog_api_client import DogAPIError, DogImageClient
from thedog.utils.logger import get_logger

logger = get_logger()


class GallerySession:
    """
    Holds what the gallery screen shows: the current image, the favourites
    and the last error message. The client is injected.

    Errors from the client are caught here and turned into `error_message`,
    which the presentation layer shows until `dismiss_error` is called.
    """

    def __init__(self, client: DogImageClient) -> None:
        self._client = client
        self.current: DogImage | None = None
        self.favorites: list[DogImage] = []
        self.error_message: str | None = None
        self.deleting: int | None = None

    def next_dog(self) -> DogImage | None:
        """Load a new random image. On failure keep the previous one and return None."""
        try:
            self.current = self._client.fetch_random_image()
        except DogAPIError as e:
            logger.warning("Fetching random dog failed: %s", e)
            self.error_message = str(e)
            return None
        return self.current

    def load_favorites(self) -> list[DogImage]:
        try:
            self.favorites = self._client.list_favorites()
        except DogAPIError as e:
            logger.warning("Loading favourites failed: %s", e)
            self.error_message = f"Failed to load favorites: {e}"
        return self.favorites

    def vote(self, like: bool) -> DogImage | None:
        """
        Like or skip the current image, then move on to the next one.

        A like adds the current image to the favourites and reloads them. The
        next image is fetched whether or not the like succeeded.
        """
        dog = self.current
        if like and dog is not None:
            try:
                self._client.add_favorite(dog.id)
            except DogAPIError as e:
                logger.warning("Adding %s to favourites failed: %s", dog.id, e)
                self.error_message = f"Failed to add to favorites: {e}"
            else:
                self.load_favorites()
        return self.next_dog()

    def remove_favorite(self, image: DogImage) -> None:
        if image.favorite_id is None:
            return
        self.deleting = image.favorite_id
        try:
            self._client.delete_favorite(image.favorite_id)
        except DogAPIError as e:
            logger.warning("Deleting favourite %s failed: %s", image.favorite_id, e)
            self.error_message = f"Failed to delete favorite: {e}"
        else:
            self.load_favorites()
        finally:
            self.deleting = None

    def dismiss_error(self) -> None:
        self.error_message = None
