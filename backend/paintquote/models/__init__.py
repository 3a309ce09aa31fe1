"""Domain models for the paintquote pricing engine."""

from paintquote.models.enums import ProjectType, Surface
from paintquote.models.inputs import ChargeRates, PaintCosts, ProjectAreas
from paintquote.models.profile import ContractorProfile
from paintquote.models.quote import (
    LaborCalculation,
    MaterialsBreakdown,
    QuoteCalculation,
    RevenueBreakdown,
    SurfaceMaterials,
)
from paintquote.models.request import QuoteRequest

__all__ = [
    "ChargeRates",
    "ContractorProfile",
    "LaborCalculation",
    "MaterialsBreakdown",
    "PaintCosts",
    "ProjectAreas",
    "ProjectType",
    "QuoteCalculation",
    "QuoteRequest",
    "RevenueBreakdown",
    "Surface",
    "SurfaceMaterials",
]
