from typing import Optional

from domain.schemas.base import APIRequest, APIResponse


class ProfileInfo(APIResponse):
    """Public part of a profile, embedded in comments and recipes"""

    id: int
    name: str
    surname: str
    image: Optional[bytes] = None


class DeleteProfileRequest(APIRequest):
    profile_id: int
