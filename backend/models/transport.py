# models/transport.py
from __future__ import annotations
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict


class TransportMode(str, Enum):
    BICYCLE = "bicycle"
    CAR = "car"
    BUS = "bus"
    TRUCK = "truck"


class ModeInfo(BaseModel):
    """Display metadata for a transport mode. Only the HTTP layer uses this."""

    model_config = ConfigDict(frozen=True)

    label: str
    icon: str
    color: str


TRANSPORT_MODES: Dict[str, ModeInfo] = {
    TransportMode.BICYCLE.value: ModeInfo(label="Bicicleta", icon="🚲", color="#10b981"),
    TransportMode.CAR.value: ModeInfo(label="Carro", icon="🚗", color="#3b82f6"),
    TransportMode.BUS.value: ModeInfo(label="Ônibus", icon="🚌", color="#f59e0b"),
    TransportMode.TRUCK.value: ModeInfo(label="Caminhão", icon="🚚", color="#ef4444"),
}


def mode_info(mode: str) -> ModeInfo:
    # Custom factor tables may carry modes we have no artwork for
    return TRANSPORT_MODES.get(mode, ModeInfo(label=mode.title(), icon="", color="#6b7280"))
