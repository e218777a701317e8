"""
Records returned by the dog image service, with their JSON decoders.

Wire field names are snake_case. A missing key or a JSON null for an optional
field means "absent"; a missing required key or a value of the wrong type raises
ValueError. Unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

# Ratings shown for a breed, in display order: (title, attribute).
CHARACTERISTIC_FIELDS: tuple[tuple[str, str], ...] = (
    ("Intelligence", "intelligence"),
    ("Affection", "affection_level"),
    ("Energy", "energy_level"),
    ("Dog Friendly", "dog_friendly"),
)


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what}: expected object, got {type(data).__name__}")
    return data


def _req_str(data: dict[str, Any], key: str, what: str) -> str:
    if key not in data or data[key] is None:
        raise ValueError(f"{what}: missing required field '{key}'")
    val = data[key]
    if not isinstance(val, str):
        raise ValueError(f"{what}: field '{key}' must be a string")
    return val


def _req_int(data: dict[str, Any], key: str, what: str) -> int:
    if key not in data or data[key] is None:
        raise ValueError(f"{what}: missing required field '{key}'")
    val = data[key]
    # bool is an int subclass; JSON true/false is not a number
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"{what}: field '{key}' must be an integer")
    return val


def _opt_str(data: dict[str, Any], key: str, what: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _req_str(data, key, what)


def _opt_int(data: dict[str, Any], key: str, what: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return _req_int(data, key, what)


@dataclass(frozen=True)
class Weight:
    imperial: str
    metric: str

    @classmethod
    def from_dict(cls, data: Any) -> Weight:
        d = _require_mapping(data, "weight")
        return cls(
            imperial=_req_str(d, "imperial", "weight"),
            metric=_req_str(d, "metric", "weight"),
        )


@dataclass(frozen=True)
class Breed:
    """Descriptive breed metadata. Ratings are 1-5 on the service; not validated here."""

    name: str
    weight: Weight
    temperament: Optional[str] = None
    origin: Optional[str] = None
    description: Optional[str] = None
    life_span: Optional[str] = None
    adaptability: Optional[int] = None
    affection_level: Optional[int] = None
    child_friendly: Optional[int] = None
    dog_friendly: Optional[int] = None
    energy_level: Optional[int] = None
    intelligence: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> Breed:
        d = _require_mapping(data, "breed")
        if d.get("weight") is None:
            raise ValueError("breed: missing required field 'weight'")
        return cls(
            name=_req_str(d, "name", "breed"),
            weight=Weight.from_dict(d["weight"]),
            temperament=_opt_str(d, "temperament", "breed"),
            origin=_opt_str(d, "origin", "breed"),
            description=_opt_str(d, "description", "breed"),
            life_span=_opt_str(d, "life_span", "breed"),
            adaptability=_opt_int(d, "adaptability", "breed"),
            affection_level=_opt_int(d, "affection_level", "breed"),
            child_friendly=_opt_int(d, "child_friendly", "breed"),
            dog_friendly=_opt_int(d, "dog_friendly", "breed"),
            energy_level=_opt_int(d, "energy_level", "breed"),
            intelligence=_opt_int(d, "intelligence", "breed"),
        )

    def characteristics(self) -> list[tuple[str, int]]:
        """Return (title, rating) pairs for the ratings the service provided, in display order."""
        out: list[tuple[str, int]] = []
        for title, attr in CHARACTERISTIC_FIELDS:
            rating = getattr(self, attr)
            if rating is not None:
                out.append((title, rating))
        return out


@dataclass(frozen=True)
class DogImage:
    """
    One image resource.

    favorite_id is set only on images produced by the favourites listing; it is
    the id of the favourite record, not of the image.
    """

    id: str
    url: str
    width: int
    height: int
    breeds: tuple[Breed, ...] = ()
    favorite_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> DogImage:
        d = _require_mapping(data, "image")
        raw_breeds = d.get("breeds")
        if raw_breeds is None:
            breeds: tuple[Breed, ...] = ()
        elif isinstance(raw_breeds, list):
            breeds = tuple(Breed.from_dict(b) for b in raw_breeds)
        else:
            raise ValueError("image: field 'breeds' must be an array")
        return cls(
            id=_req_str(d, "id", "image"),
            url=_req_str(d, "url", "image"),
            width=_req_int(d, "width", "image"),
            height=_req_int(d, "height", "image"),
            breeds=breeds,
        )

    @property
    def primary_breed(self) -> Optional[Breed]:
        return self.breeds[0] if self.breeds else None

    def with_favorite_id(self, favorite_id: int) -> DogImage:
        """Return a copy of this image tagged with its favourite record id."""
        return replace(self, favorite_id=favorite_id)


@dataclass(frozen=True)
class FavoriteRecord:
    id: int
    image_id: str

    @classmethod
    def from_dict(cls, data: Any) -> FavoriteRecord:
        d = _require_mapping(data, "favourite")
        return cls(
            id=_req_int(d, "id", "favourite"),
            image_id=_req_str(d, "image_id", "favourite"),
        )


def decode_list(data: Any, decoder: Any, what: str) -> list[Any]:
    """Decode a JSON array with a per-element decoder (e.g. DogImage.from_dict)."""
    if not isinstance(data, list):
        raise ValueError(f"{what}: expected array, got {type(data).__name__}")
    return [decoder(item) for item in data]
