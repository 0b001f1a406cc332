"""
Platforms Route

Lists supported platforms, their section markers and options.
"""

from fastapi import APIRouter
from pydantic.alias_generators import to_camel

from backend.api.schemas import PlatformInfo, PlatformListResponse
from repurposer.prompting import PLATFORM_PROFILES

router = APIRouter()


@router.get("/platforms", response_model=PlatformListResponse, response_model_by_alias=True)
async def list_platforms() -> PlatformListResponse:
    """List every platform accepted as request type."""
    platforms = [
        PlatformInfo(
            platform=profile.platform.value,
            name=profile.display_name,
            sections=[section.marker for section in profile.sections],
            response_fields=[to_camel(name) for name in profile.fields_model.model_fields],
            uses_duration=profile.uses_duration,
            uses_keywords=profile.uses_keywords,
        )
        for profile in PLATFORM_PROFILES.values()
    ]
    return PlatformListResponse(platforms=platforms, count=len(platforms))
