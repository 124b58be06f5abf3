"""Health and readiness checks."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_store
from ..services.contact_store import ContactStore

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "addressbook"}


@router.get("/ready")
async def readiness_check(store: ContactStore = Depends(get_store)):
    contacts = await store.get_all()
    return {"status": "ready", "service": "addressbook", "contacts": len(contacts)}
