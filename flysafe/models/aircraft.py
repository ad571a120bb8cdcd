"""
Aircraft geometry models for the CG/MAC calculator
"""
from pydantic import BaseModel, Field
from typing import Optional


class PlaneDimensions(BaseModel):
    """Wing and tail measurements, all in the same length unit"""
    wing_span: float = Field(gt=0)
    root_chord: float = Field(gt=0)
    tip_chord: float = Field(gt=0)
    sweep: float = 0.0  # leading edge offset root to tip, 0 for straight wings
    tail_span: float = Field(default=0.0, ge=0)
    tail_root_chord: float = Field(default=0.0, ge=0)
    tail_tip_chord: Optional[float] = Field(default=None, ge=0)  # defaults to tail_root_chord
    wing_tail_distance: float = Field(default=0.0, ge=0)


class CGRange(BaseModel):
    """Recommended center of gravity range, measured from the wing root leading edge"""
    forward: float
    aft: float


class PlaneCalculation(BaseModel):
    """Calculated aerodynamic values"""
    wing_area: float
    tail_area: float
    mac: float
    mac_leading_edge: float
    recommended_cg: CGRange
    hint: str


class PlaneWithCalculations(PlaneDimensions):
    """Plane dimensions merged with the calculated values"""
    wing_area: float
    tail_area: float
    mac: float
    cg_forward: float
    cg_aft: float
