import os
import socket
import tempfile

# Settings are read at import time; keep test logs out of the working tree
os.environ.setdefault("LOG_DIRECTORY", os.path.join(tempfile.gettempdir(), "favorite-places-logs"))

import pytest
from fastapi.testclient import TestClient

from favorite_places.main import create_app
from favorite_places.repos.dataset_loader import load_places
from favorite_places.repos.places_repo import PlacesRepository


@pytest.fixture
def dataset_places():
    return load_places()


@pytest.fixture
def repo():
    return PlacesRepository()


@pytest.fixture
def app(repo):
    return create_app(repo)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def new_place():
    return {
        "id": "2f1b6c9e-5d4a-4e3b-9c8d-7a6b5c4d3e2f",
        "name": "Robin",
        "latitude": 40.1125,
        "longitude": -88.2269,
        "description": "Alma Mater statue on a sunny afternoon",
    }


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
