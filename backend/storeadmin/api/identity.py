from typing import Optional

from fastapi import Request

from storeadmin.config import settings


def get_current_user_id(request: Request) -> Optional[str]:
    """
    Caller identity as set by the auth layer in front of the API.
    Returns None when the header is absent or blank.
    """
    user_id = request.headers.get(settings.AUTH_USER_HEADER)
    if user_id and user_id.strip():
        return user_id.strip()
    return None
