from fastapi import APIRouter, Depends

from app.core.db import get_registry
from app.services.customer_service import CustomerRegistry

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(registry: CustomerRegistry = Depends(get_registry)):
    return {"status": "ok", "customers": len(registry)}
