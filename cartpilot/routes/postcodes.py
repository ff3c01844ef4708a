from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cartpilot.routes.deps import get_postcode_service
from cartpilot.schemas.stores import PostcodeLocation
from cartpilot.services.postcodes import PostcodeService, normalize, validate_format

router = APIRouter(prefix="/postcodes", tags=["postcodes"])


class PostcodeValidation(BaseModel):
    postcode: str
    valid: bool
    normalized: str


@router.get("/{postcode}/validate")
async def validate_postcode(postcode: str) -> PostcodeValidation:
    """Format check only, no network call."""
    return PostcodeValidation(postcode=postcode, valid=validate_format(postcode), normalized=normalize(postcode))


@router.get("/{postcode}")
async def lookup_postcode(
    postcode: str,
    postcodes: PostcodeService = Depends(get_postcode_service),
) -> PostcodeLocation:
    return await postcodes.lookup(postcode)
