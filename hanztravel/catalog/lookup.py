from typing import List, Dict, Optional, Any, Sequence
import json

from hanztravel.catalog import defaults
from hanztravel.types import Location, Airline, Aircraft


class Catalog:
    """Read-only location, airline and aircraft tables.

    Built from the bundled defaults or from a JSON file with the keys
    ``locations``, ``airlines`` and ``aircraft``. Entries keep their input
    order (the fare model depends on airline position) and are indexed for
    O(1) lookups by identifier. Invalid rows (bad coordinates, non-positive
    cruise speed) raise a pydantic ``ValidationError`` at load time.
    """

    def __init__(self, locations: Sequence[Dict[str, Any]],
                 airlines: Sequence[Any],
                 aircraft: Sequence[Dict[str, Any]]):
        self.locations: List[Location] = [Location(**row) for row in locations]
        self.airlines: List[Airline] = [
            a if isinstance(a, Airline) else Airline(name=a) if isinstance(a, str) else Airline(**a)
            for a in airlines
        ]
        self.aircraft: List[Aircraft] = [Aircraft(**row) for row in aircraft]

        if not (self.locations and self.airlines and self.aircraft):
            raise ValueError("Catalog needs at least one location, airline and aircraft")

        self.by_code: Dict[str, Location] = self._index(self.locations, lambda l: l.code.upper(), "location code")
        self.by_airline: Dict[str, Airline] = self._index(self.airlines, lambda a: a.name, "airline")
        self.by_type: Dict[str, Aircraft] = self._index(self.aircraft, lambda a: a.type, "aircraft type")

    @staticmethod
    def _index(items, key, label: str) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for item in items:
            k = key(item)
            if k in out:
                raise ValueError(f"Duplicate {label}: {k}")
            out[k] = item
        return out

    @classmethod
    def default(cls) -> "Catalog":
        return cls(defaults.LOCATIONS, defaults.AIRLINES, defaults.AIRCRAFT)

    @classmethod
    def from_json(cls, path: str) -> "Catalog":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(
            data.get("locations", []),
            data.get("airlines", []),
            data.get("aircraft", []),
        )

    # Lookups return None for unknown identifiers; callers decide what that means

    def location(self, code: Optional[str]) -> Optional[Location]:
        if not code:
            return None
        return self.by_code.get(code.strip().upper())

    def airline(self, name: Optional[str]) -> Optional[Airline]:
        if not name:
            return None
        return self.by_airline.get(name.strip())

    def aircraft_type(self, type_name: Optional[str]) -> Optional[Aircraft]:
        if not type_name:
            return None
        return self.by_type.get(type_name.strip())

    def as_dict(self) -> Dict[str, Any]:
        return {
            "locations": [l.model_dump() for l in self.locations],
            "airlines": [a.name for a in self.airlines],
            "aircraft": [a.model_dump() for a in self.aircraft],
        }


def load_catalog(path: Optional[str] = None) -> Catalog:
    if path:
        return Catalog.from_json(path)
    return Catalog.default()
