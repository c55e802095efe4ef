"""
Loads the bundled places dataset.

The file starts with two lines that are not data: an integrity checksum used
by test tooling, then the column header. Both are skipped. Every remaining row
is ``id,name,latitude,longitude,description``.
"""
import csv
import hashlib
import io
import logging
from pathlib import Path
from typing import Optional

from favorite_places.core.config import settings
from favorite_places.core.errors import DatasetError
from favorite_places.core.logger import logs
from favorite_places.models.places_model import Place

BUNDLED_DATASET = Path(__file__).resolve().parent.parent / "data" / "places.csv"
SKIP_LINES = 2
FIELD_COUNT = 5


def dataset_path(path: Optional[str | Path] = None) -> Path:
    """Resolve the dataset location: explicit argument, then settings, then the bundled file."""
    if path is not None:
        return Path(path)
    if settings.DATASET_PATH:
        return Path(settings.DATASET_PATH)
    return BUNDLED_DATASET


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DatasetError(f"Couldn't load {path.name}") from e


def load_places(path: Optional[str | Path] = None) -> list[Place]:
    source = dataset_path(path)
    reader = csv.reader(io.StringIO(_read_text(source)))

    places: list[Place] = []
    for parts in reader:
        if reader.line_num <= SKIP_LINES or not parts:
            continue
        if len(parts) != FIELD_COUNT:
            raise DatasetError(
                f"{source.name} line {reader.line_num}: expected {FIELD_COUNT} fields, got {len(parts)}"
            )
        try:
            places.append(Place.from_row(parts))
        except ValueError as e:
            raise DatasetError(f"{source.name} line {reader.line_num}: {e}") from e

    logs.log(logging.INFO, f"Loaded {len(places)} places from {source}")
    return places


def dataset_checksum(path: Optional[str | Path] = None) -> str:
    """Checksum recorded on the first line of the dataset."""
    return _read_text(dataset_path(path)).split("\n", 1)[0].strip()


def compute_checksum(path: Optional[str | Path] = None) -> str:
    """SHA-256 of everything after the checksum line."""
    text = _read_text(dataset_path(path))
    body = text.split("\n", 1)[1] if "\n" in text else ""
    return hashlib.sha256(body.encode("utf-8")).hexdigest()
