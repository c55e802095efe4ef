from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from favorite_places.core.config import settings
from favorite_places.services.places_service import PlacesService
from favorite_places.routes.places_route import get_places_service

router = APIRouter()

# --- Root Endpoint ---
# Clients call this on startup to recognise the service, so the body must stay fixed
@router.get("/", response_class=PlainTextResponse)
def root():
    return PlainTextResponse(settings.SERVER_IDENTIFIER)

# --- Reset ---
# Used by tests to put the catalog back to the bundled dataset
@router.get("/reset")
def reset_endpoint(service: PlacesService = Depends(get_places_service)):
    service.reset()
    return Response(status_code=200)
