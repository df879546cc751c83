# core/channel_keys.py
"""
Composite channel keys scoped by timeline.

- Mesh:    "mesh:#gaming"
- Geohash: "geo:9q8yy:#gaming"

The same channel name on different timelines, or under different geohashes,
always yields a different key. The channel name is the last ':' segment.
"""
import logging
from typing import Optional
from model.channel import GeohashChannel, LocationTimeline, Timeline
from repository.namespaces import GEO_PREFIX, MESH_PREFIX, SEPARATOR
from util.enums import GeohashChannelLevel

logger = logging.getLogger(__name__)


def create(timeline: Optional[Timeline], channel_name: str) -> str:
    """Build the key for `channel_name` on `timeline` (None counts as mesh)."""
    if isinstance(timeline, LocationTimeline):
        return f"{GEO_PREFIX}{timeline.channel.geohash}{SEPARATOR}{channel_name}"
    return f"{MESH_PREFIX}{channel_name}"


def parse_channel_name(key: str) -> str:
    return key.rpartition(SEPARATOR)[2]


def parse_geohash(key: str) -> Optional[str]:
    """
    - "geo:9q8yy:#gaming" -> "9q8yy"
    - Anything without the geo prefix -> None.
    """
    if not is_geo(key):
        return None
    return key[len(GEO_PREFIX):].partition(SEPARATOR)[0]


def is_mesh(key: str) -> bool:
    return key.startswith(MESH_PREFIX)


def is_geo(key: str) -> bool:
    return key.startswith(GEO_PREFIX)


def normalize(key: str) -> str:
    """Upgrade a legacy un-prefixed key ("#gaming") to "mesh:#gaming"."""
    if SEPARATOR in key:
        return key
    logger.debug("normalize.legacy key=%s", key)
    return f"{MESH_PREFIX}{key}"


def level_for_geohash_length(length: int) -> GeohashChannelLevel:
    if length <= 2:
        return GeohashChannelLevel.REGION
    if length <= 4:
        return GeohashChannelLevel.PROVINCE
    if length == 5:
        return GeohashChannelLevel.CITY
    if length == 6:
        return GeohashChannelLevel.NEIGHBORHOOD
    if length == 7:
        return GeohashChannelLevel.BLOCK
    return GeohashChannelLevel.BUILDING


def geohash_channel(geohash: str) -> GeohashChannel:
    """Channel for `geohash`, its level derived from the geohash length."""
    return GeohashChannel(level=level_for_geohash_length(len(geohash)), geohash=geohash)


def display_name(key: str) -> str:
    """
    - "mesh:#gaming" -> "#gaming"
    - "geo:9q8yy:#gaming" -> "#gaming | #9q8yy"
    An empty geohash drops the location suffix.
    """
    channel_name = parse_channel_name(key)
    if is_geo(key):
        geohash = parse_geohash(key)
        if geohash:
            return f"{channel_name} | #{geohash}"
    return channel_name
