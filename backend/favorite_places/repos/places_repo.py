import threading
from typing import Callable

from favorite_places.models.places_model import Place
from favorite_places.repos.dataset_loader import load_places

class PlacesRepository:
    """
    In-memory place catalog keyed by id, kept in insertion order.
    Sync route handlers run on a thread pool, so every access goes through one lock.
    """
    def __init__(self, loader: Callable[[], list[Place]] = load_places):
        self.loader = loader
        self._lock = threading.Lock()
        self._places: dict[str, Place] = self._index(loader())

    @staticmethod
    def _index(places: list[Place]) -> dict[str, Place]:
        indexed: dict[str, Place] = {}
        for place in places:
            # A repeated id replaces the earlier row and moves to the end
            indexed.pop(place.id, None)
            indexed[place.id] = place
        return indexed

    def list_all(self) -> list[Place]:
        with self._lock:
            return list(self._places.values())

    def upsert(self, place: Place) -> bool:
        """
        Removes any place with the same id, then appends the new one.
        Returns True when an existing place was replaced.
        """
        with self._lock:
            replaced = self._places.pop(place.id, None) is not None
            self._places[place.id] = place
            return replaced

    def reload(self) -> None:
        """Swaps the whole catalog for a fresh copy of the dataset."""
        places = self._index(self.loader())
        with self._lock:
            self._places = places

    def __len__(self) -> int:
        with self._lock:
            return len(self._places)
