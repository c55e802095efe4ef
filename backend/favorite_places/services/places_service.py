import logging
from favorite_places.repos.places_repo import PlacesRepository
from favorite_places.models.places_model import Place
from favorite_places.core.logger import logs

class PlacesService:
    def __init__(self, repo: PlacesRepository):
        self.repo = repo

    def list_places(self) -> list[Place]:
        return self.repo.list_all()

    def save_favorite_place(self, place: Place) -> bool:
        replaced = self.repo.upsert(place)
        action = "Replaced" if replaced else "Added"
        logs.log(logging.INFO, f"{action} favorite place {place.id}", extra={"name": place.name})
        return replaced

    def reset(self) -> None:
        self.repo.reload()
        logs.log(logging.INFO, f"Catalog reset to dataset ({len(self.repo)} places)")
