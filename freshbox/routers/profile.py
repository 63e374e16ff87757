"""
Profile Router

User profile, language preference and UI strings.
"""
from fastapi import APIRouter, Depends, HTTPException

from freshbox.errors import ERROR_UNSUPPORTED_LANGUAGE
from freshbox.i18n import SUPPORTED_LANGUAGES, is_supported
from freshbox.store import Store
from .deps import get_app_store
from .models import SetLanguageRequest, UpdateProfileRequest

router = APIRouter(tags=["profile"])


@router.get("/profile")
async def get_profile(store: Store = Depends(get_app_store)):
    return {
        **store.user.model_dump(),
        "languages": SUPPORTED_LANGUAGES,
    }


@router.patch("/profile")
async def update_profile(request: UpdateProfileRequest, store: Store = Depends(get_app_store)):
    """Partial update: only fields present in the body are changed."""
    user = store.update_user(request.model_dump(exclude_unset=True, exclude_none=True))
    return user.model_dump()


@router.put("/profile/language")
async def set_language(request: SetLanguageRequest, store: Store = Depends(get_app_store)):
    if not is_supported(request.language):
        raise HTTPException(status_code=400, detail=f"{ERROR_UNSUPPORTED_LANGUAGE}: {request.language}")
    language = store.set_language(request.language)
    return {"language": language, "app_name": store.t("app_name")}


@router.get("/i18n/{key}")
async def translate(key: str, store: Store = Depends(get_app_store)):
    """Translate a UI key into the user's language (unknown keys echo back)."""
    return {"key": key, "language": store.user.language, "text": store.t(key)}
