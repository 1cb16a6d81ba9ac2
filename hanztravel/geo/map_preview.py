from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel

from hanztravel.types import Location

OSM_EMBED = "https://www.openstreetmap.org/export/embed.html"

# Half-width of the preview window in degrees
_LON_SPAN = 5
_LAT_SPAN = 3


class MapPreview(BaseModel):
    title: str
    lat: float
    lon: float
    embed_url: str


def osm_embed_url(lat: float, lon: float) -> str:
    """
    OpenStreetMap embed URL centred on (lat, lon) with a marker.
    """
    marker = quote(f"{lat},{lon}", safe="")
    bbox = quote(f"{lon - _LON_SPAN},{lat - _LAT_SPAN},{lon + _LON_SPAN},{lat + _LAT_SPAN}", safe="")
    return f"{OSM_EMBED}?&marker={marker}&layers=mapnik&bbox={bbox}"


def map_preview(location: Location, role: Optional[str] = None) -> MapPreview:
    label = f"{location.city} ({location.code})"
    title = f"{role}: {label}" if role else label
    return MapPreview(
        title=title,
        lat=location.lat,
        lon=location.lon,
        embed_url=osm_embed_url(location.lat, location.lon),
    )
