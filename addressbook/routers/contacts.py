"""Contact routes - list, detail, add form, delete.

Form handling follows post/redirect/get: a valid submission redirects to the
list, an invalid one redisplays the form with the errors and the values the
user typed.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from ..config import AddressBookSettings
from ..deps import get_settings, get_store, get_templates
from ..errors import InvalidContact, InvalidId
from ..services.contact_store import ContactStore
from ..services.form_converter import ContactFormConverter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contacts"])


def build_templates(cfg: AddressBookSettings) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(cfg.templates_dir))
    templates.env.globals["app_title"] = cfg.app_title
    templates.env.globals["birthday_format"] = cfg.birthday_format
    return templates


@router.get("/")
async def root():
    return RedirectResponse("/contacts/", status_code=303)


@router.get("/contacts/")
async def contact_list(
    request: Request,
    store: ContactStore = Depends(get_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    contacts = await store.get_all()
    return templates.TemplateResponse(request, "contacts/list.html", {
        "contacts": contacts,
        "total": len(contacts),
    })


@router.get("/contacts/new")
async def contact_form(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    return templates.TemplateResponse(request, "contacts/form.html", {
        "values": {},
        "errors": {},
    })


@router.post("/contacts/")
async def contact_create(
    request: Request,
    store: ContactStore = Depends(get_store),
    cfg: AddressBookSettings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
):
    form = await request.form()
    converter = ContactFormConverter(birthday_format=cfg.birthday_format)

    if converter.verify_and_convert(form):
        try:
            await store.add_contact(converter.command)
        except InvalidContact as exc:
            converter.errors.update(exc.errors or {"first_name": exc.message})
        else:
            return RedirectResponse("/contacts/", status_code=303)

    logger.debug("Add contact form rejected: %s", converter.errors)
    return templates.TemplateResponse(
        request,
        "contacts/form.html",
        {"values": converter.values, "errors": converter.errors},
        status_code=422,
    )


@router.get("/contacts/{contact_id}")
async def contact_detail(
    request: Request,
    contact_id: str,
    store: ContactStore = Depends(get_store),
    templates: Jinja2Templates = Depends(get_templates),
):
    try:
        contact = await store.get_contact(contact_id)
    except InvalidId:
        return templates.TemplateResponse(
            request, "contacts/not_found.html", {"contact_id": contact_id}, status_code=404
        )
    return templates.TemplateResponse(request, "contacts/detail.html", {
        "contact": contact,
    })


@router.post("/contacts/{contact_id}/delete")
async def contact_delete(contact_id: str, store: ContactStore = Depends(get_store)):
    await store.delete_contact(contact_id)
    return RedirectResponse("/contacts/", status_code=303)
