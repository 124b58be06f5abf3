"""Test the HTML contact pages and add-contact form."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from addressbook.app import create_app
from addressbook.config import AddressBookSettings
from addressbook.schemas.contact import ContactCreate
from addressbook.services.contact_store import ContactStore


@pytest.mark.asyncio
async def test_root_redirects_to_list(client: AsyncClient):
    response = await client.get("/", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/contacts/"


@pytest.mark.asyncio
async def test_contact_list_page(client: AsyncClient, store: ContactStore):
    await store.add_contact(ContactCreate(first_name="Pedro", surname="Ballesteros"))

    response = await client.get("/contacts/")
    assert response.status_code == 200
    assert "Pedro" in response.text
    assert "Ballesteros" in response.text


@pytest.mark.asyncio
async def test_contact_new_form(client: AsyncClient):
    response = await client.get("/contacts/new")
    assert response.status_code == 200
    assert 'name="first_name"' in response.text


@pytest.mark.asyncio
async def test_create_contact_via_form(client: AsyncClient, store: ContactStore):
    response = await client.post("/contacts/", data={
        "first_name": "Pedro",
        "surname": "Ballesteros",
        "birthday": "08/01/1974",
        "phone": "610101010",
    }, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/contacts/"

    contacts = await store.get_all()
    assert len(contacts) == 1
    assert contacts[0].birthday.isoformat() == "1974-01-08"


@pytest.mark.asyncio
async def test_create_contact_without_first_name_redisplays_form(
    client: AsyncClient, store: ContactStore
):
    response = await client.post("/contacts/", data={
        "first_name": "  ",
        "surname": "Ballesteros",
    }, follow_redirects=False)
    assert response.status_code == 422
    assert "first_name: required" in response.text
    assert 'value="Ballesteros"' in response.text
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_create_duplicate_via_form(client: AsyncClient, store: ContactStore):
    await store.add_contact(ContactCreate(first_name="Pedro"))

    response = await client.post("/contacts/", data={"first_name": "pedro"}, follow_redirects=False)
    assert response.status_code == 422
    assert "first_name: duplicate" in response.text
    assert len(await store.get_all()) == 1


@pytest.mark.asyncio
async def test_contact_detail(client: AsyncClient, store: ContactStore):
    contact_id = await store.add_contact(ContactCreate(first_name="Pedro", phone="610101010"))

    response = await client.get(f"/contacts/{contact_id}")
    assert response.status_code == 200
    assert "610101010" in response.text


@pytest.mark.asyncio
async def test_contact_detail_unknown(client: AsyncClient):
    response = await client.get("/contacts/INVALID")
    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "Contact not found" in response.text


@pytest.mark.asyncio
async def test_delete_via_form(client: AsyncClient, store: ContactStore):
    contact_id = await store.add_contact(ContactCreate(first_name="Pedro"))

    response = await client.post(f"/contacts/{contact_id}/delete", follow_redirects=False)
    assert response.status_code == 303
    assert await store.get_all() == []

    again = await client.post(f"/contacts/{contact_id}/delete", follow_redirects=False)
    assert again.status_code == 303


@pytest.mark.asyncio
async def test_form_uses_settings_passed_to_app(store: ContactStore):
    cfg = AddressBookSettings(birthday_format="%Y-%m-%d", app_title="Agenda")
    app = create_app(store=store, cfg=cfg)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        response = await c.post("/contacts/", data={
            "first_name": "Pedro",
            "birthday": "1974-01-08",
        }, follow_redirects=False)
        assert response.status_code == 303

        page = await c.get("/contacts/")
        assert "Agenda" in page.text
        assert "1974-01-08" in page.text

    contacts = await store.get_all()
    assert contacts[0].birthday.isoformat() == "1974-01-08"
