import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from campus_robot.errors import PlanUnresolved
from campus_robot.models import Coordinate

logger = logging.getLogger(__name__)

CAMPUS_LOCATIONS: Dict[str, Dict[str, int]] = {
    "Library": {"x": 10, "y": 15},
    "Student Center": {"x": -5, "y": 20},
    "Engineering Building": {"x": 20, "y": 10},
    "Dining Hall": {"x": -10, "y": 5},
    "Dormitory A": {"x": 15, "y": -10},
    "Dormitory B": {"x": -15, "y": -5},
    "Sports Complex": {"x": 25, "y": -15},
    "Admin Building": {"x": 0, "y": 30},
    "Lab Building": {"x": -20, "y": 15},
    "Parking Lot": {"x": 30, "y": 0},
    "CSVTU UTD 1 Building": {"x": 35, "y": 20},
}


class LocationRepository:
    """Read-only lookup of campus location names to grid coordinates."""

    def __init__(self, locations: Optional[Dict[str, Dict[str, int]]] = None):
        raw = locations if locations is not None else self._load_table()
        self._locations = {name: Coordinate.model_validate(coord) for name, coord in raw.items()}

    def _load_table(self) -> Dict[str, Dict[str, int]]:
        path = os.getenv("CAMPUS_LOCATIONS_PATH")
        if not path:
            return CAMPUS_LOCATIONS
        try:
            table = json.loads(Path(path).read_text(encoding="utf-8"))
            for coord in table.values():
                Coordinate.model_validate(coord)
            return table
        except (OSError, json.JSONDecodeError, AttributeError, ValidationError) as exc:
            logger.warning("Could not load locations from %s (%s); using built-in campus map", path, exc)
            return CAMPUS_LOCATIONS

    def resolve(self, name: str) -> Coordinate:
        try:
            return self._locations[name]
        except KeyError:
            raise PlanUnresolved(f"unknown location: {name}") from None

    def all(self) -> Dict[str, Coordinate]:
        return dict(self._locations)
