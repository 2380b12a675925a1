from enum import Enum

LBS_TO_KG = 0.453592


class MassUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


def to_kg(value: float, unit: MassUnit) -> float:
    if unit is MassUnit.LBS:
        return value * LBS_TO_KG
    return value
