from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from favorite_places.models.places_model import Place
from favorite_places.services.places_service import PlacesService
from favorite_places.core.dispatch import JSON_MEDIA_TYPE, UTF8JSONResponse

router = APIRouter()

def get_places_service(request: Request) -> PlacesService:
    return request.app.state.places_service

@router.get("/places", response_model=list[Place], response_class=UTF8JSONResponse)
def list_places_endpoint(service: PlacesService = Depends(get_places_service)):
    return service.list_places()

@router.post("/favoriteplace")
def favorite_place_endpoint(
    place: Place,
    service: PlacesService = Depends(get_places_service)
):
    """
    Adds the place, or replaces the one with the same id.
    Invalid payloads never get here: they are answered with a 400 by the dispatcher.
    """
    service.save_favorite_place(place)
    return Response(status_code=200, media_type=JSON_MEDIA_TYPE)
