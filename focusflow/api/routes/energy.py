"""
Energy Route - Energy check-in

The user says how much energy they have; we answer with activities that
fit, a timer length, and a tip.
"""

from fastapi import APIRouter

from focusflow.adhd.energy import advise, is_valid_level
from focusflow.api.models import EnergyRequest
from focusflow.errors import ValidationError


router = APIRouter()


@router.post("/energy")
async def energy_check_in(request: EnergyRequest):
    """Suggestions for a low, medium, or high energy level."""
    if not is_valid_level(request.level):
        raise ValidationError("Level must be: low, medium, or high")
    return advise(request.level).to_dict()
