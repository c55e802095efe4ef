from typing import Optional

from fastapi import FastAPI

from favorite_places.core.dispatch import install_dispatch_middleware, install_exception_handlers
from favorite_places.repos.places_repo import PlacesRepository
from favorite_places.services.places_service import PlacesService
from favorite_places.routes.service_route import router as service_router
from favorite_places.routes.places_route import router as places_router


def create_app(repo: Optional[PlacesRepository] = None) -> FastAPI:
    """
    Builds the Favorite Places application around a catalog.
    Without a repository the bundled dataset is loaded, so a missing or broken
    dataset fails here, before anything is served.
    """
    # The route table is closed: no docs pages, no slash redirects
    app = FastAPI(
        title="Favorite Places",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.places_service = PlacesService(repo if repo is not None else PlacesRepository())

    install_exception_handlers(app)
    install_dispatch_middleware(app)
    app.include_router(service_router)
    app.include_router(places_router)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    from favorite_places.core.config import settings
    uvicorn.run("favorite_places.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)
