import pytest

from favorite_places.core.config import settings
from favorite_places.core.dispatch import JSON_MEDIA_TYPE
from favorite_places.models.places_model import Place


def get_places(client):
    response = client.get("/places")
    assert response.status_code == 200
    return [Place(**item) for item in response.json()]


def test_root_identifies_the_service(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == settings.SERVER_IDENTIFIER


def test_root_ignores_catalog_state(client, new_place):
    client.post("/favoriteplace", json=new_place)

    assert client.get("/").text == settings.SERVER_IDENTIFIER


def test_places_returns_the_catalog(client, repo):
    response = client.get("/places")

    assert response.headers["content-type"] == JSON_MEDIA_TYPE
    decoded = {place.id: place for place in get_places(client)}
    assert decoded == {place.id: place for place in repo.list_all()}


def test_places_field_order(client):
    first = client.get("/places").json()[0]

    assert list(first) == ["id", "name", "latitude", "longitude", "description"]


def test_post_new_place_appends(client, new_place, dataset_places):
    response = client.post("/favoriteplace", json=new_place)

    assert response.status_code == 200
    assert response.headers["content-type"] == JSON_MEDIA_TYPE
    places = get_places(client)
    assert len(places) == len(dataset_places) + 1
    assert places[-1] == Place(**new_place)


def test_post_existing_id_replaces(client, dataset_places):
    existing = dataset_places[0]
    payload = {
        "id": existing.id,
        "name": "Replacement",
        "latitude": 1.5,
        "longitude": 2.5,
        "description": "Different now",
    }

    assert client.post("/favoriteplace", json=payload).status_code == 200

    places = get_places(client)
    assert len(places) == len(dataset_places)
    matching = [place for place in places if place.id == existing.id]
    assert matching == [Place(**payload)]
    assert existing.name not in {place.name for place in matching}


@pytest.mark.parametrize("change", [
    {"id": "not-a-uuid"},
    {"name": ""},
    {"description": ""},
    {"latitude": 90.5},
    {"latitude": -91},
    {"longitude": 180.1},
    {"longitude": -181},
    {"description": None},
    {"latitude": None},
    {"name": 42},
])
def test_invalid_place_is_rejected(client, new_place, dataset_places, change):
    new_place.update(change)

    response = client.post("/favoriteplace", json=new_place)

    assert response.status_code == 400
    assert get_places(client) == dataset_places


@pytest.mark.parametrize("field", ["id", "name", "latitude", "longitude", "description"])
def test_missing_field_is_rejected(client, new_place, dataset_places, field):
    del new_place[field]

    assert client.post("/favoriteplace", json=new_place).status_code == 400
    assert get_places(client) == dataset_places


def test_unparseable_body_is_rejected(client, dataset_places):
    response = client.post(
        "/favoriteplace", content=b'{"id": ', headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert get_places(client) == dataset_places


def test_reset_restores_dataset(client, new_place, dataset_places):
    client.post("/favoriteplace", json=new_place)
    replaced = dict(new_place, id=dataset_places[0].id)
    client.post("/favoriteplace", json=replaced)

    response = client.get("/reset")

    assert response.status_code == 200
    assert get_places(client) == dataset_places
