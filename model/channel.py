# model/channel.py
from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field
from util.enums import GeohashChannelLevel


class GeohashChannel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: GeohashChannelLevel
    geohash: str

    @property
    def display_name(self) -> str:
        return f"#{self.geohash}"


class MeshTimeline(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["mesh"] = "mesh"


class LocationTimeline(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["location"] = "location"
    channel: GeohashChannel


# Flow: discriminated on `kind`; a missing timeline (None) means mesh.
Timeline = Annotated[MeshTimeline | LocationTimeline, Field(discriminator="kind")]

MESH: MeshTimeline = MeshTimeline()
