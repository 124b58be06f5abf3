"""JSON API for contacts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ..deps import get_store
from ..schemas.contact import Contact, ContactCreate, ContactCreated
from ..services.contact_store import ContactStore

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/contacts", response_model=list[Contact])
async def list_contacts(store: ContactStore = Depends(get_store)):
    return await store.get_all()


@router.post("/contacts", response_model=ContactCreated, status_code=201)
async def create_contact(data: ContactCreate, store: ContactStore = Depends(get_store)):
    contact_id = await store.add_contact(data)
    return ContactCreated(id=contact_id)


@router.get("/contacts/{contact_id}", response_model=Contact)
async def get_contact(contact_id: str, store: ContactStore = Depends(get_store)):
    return await store.get_contact(contact_id)


@router.delete("/contacts/{contact_id}", status_code=204)
async def delete_contact(contact_id: str, store: ContactStore = Depends(get_store)):
    await store.delete_contact(contact_id)
    return Response(status_code=204)
