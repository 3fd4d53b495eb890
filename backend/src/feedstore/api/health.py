from fastapi import APIRouter

from feedstore.conf import VERSION

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": True, "version": VERSION}
