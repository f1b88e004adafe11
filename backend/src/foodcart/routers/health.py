from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Service liveness")
def health():
    return {"status": "ok"}
