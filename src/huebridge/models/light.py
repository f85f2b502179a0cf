from typing import Any, Optional

from pydantic import BaseModel


class LightState(BaseModel):
    on: bool
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[list[float]] = None
    ct: Optional[int] = None
    alert: Optional[str] = None
    effect: Optional[str] = None
    colormode: Optional[str] = None  # "hs", "xy" or "ct"
    reachable: Optional[bool] = None


class Light(BaseModel):
    # Not part of the bridge payload; the id is the key the light is listed under
    id: str
    name: str

    @classmethod
    def from_bridge(cls, light_id: str, data: Any):
        if isinstance(data, dict):
            data = {**data, "id": light_id}
        return cls.model_validate(data)


class FullLight(Light):
    state: LightState
    type: Optional[str] = None
    modelid: Optional[str] = None
    swversion: Optional[str] = None
    pointsymbol: dict[str, str] = {}
