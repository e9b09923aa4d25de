"""Paddock Systems — systems embedded inside a paddock, backed by standalone rows.

Invariants:
    - Append stores a System row whose id matches the embedded copy
    - Remove by id and pop follow the same rules as embedded steps
"""

from uuid import UUID, uuid4

from sqlalchemy import select

from paddock_api.models.system import System


def _systems_url(paddock):
    return f"/api/v1/paddocks/{paddock['id']}/systems"


async def _append(client, paddock, title):
    res = await client.post(_systems_url(paddock), json={"system": {"title": title}})
    assert res.status_code == 201
    return res.json()["paddock"]


async def test_append_creates_matching_system_row(client, seed_paddock, test_db):
    paddock = await _append(client, seed_paddock, "Irrigation")
    embedded = paddock["systems"][0]
    assert embedded["title"] == "Irrigation"

    result = await test_db.execute(select(System))
    rows = result.scalars().all()
    assert len(rows) == 1
    assert rows[0].id == UUID(embedded["id"])
    assert rows[0].title == embedded["title"]


async def test_append_keeps_steps_untouched(client, seed_paddock):
    await client.post(
        f"/api/v1/paddocks/{seed_paddock['id']}/steps", json={"step": {"title": "s"}},
    )
    paddock = await _append(client, seed_paddock, "Drainage")
    assert [s["title"] for s in paddock["steps"]] == ["s"]
    assert [s["title"] for s in paddock["systems"]] == ["Drainage"]


async def test_append_to_unknown_paddock_creates_nothing(client, test_db):
    res = await client.post(
        f"/api/v1/paddocks/{uuid4()}/systems", json={"system": {"title": "x"}},
    )
    assert res.status_code == 404
    result = await test_db.execute(select(System))
    assert result.scalars().all() == []


async def test_append_rejects_step_envelope(client, seed_paddock):
    res = await client.post(_systems_url(seed_paddock), json={"step": {"title": "x"}})
    assert res.status_code == 400


async def test_list_systems(client, seed_paddock):
    await _append(client, seed_paddock, "a")
    await _append(client, seed_paddock, "b")
    res = await client.get(_systems_url(seed_paddock))
    assert res.status_code == 200
    assert [s["title"] for s in res.json()["systems"]] == ["a", "b"]


async def test_remove_system_by_id(client, seed_paddock, owner_auth):
    paddock = await _append(client, seed_paddock, "a")
    target = paddock["systems"][0]["id"]
    res = await client.delete(f"{_systems_url(seed_paddock)}/{target}", headers=owner_auth)
    assert res.status_code == 204
    assert (await client.get(_systems_url(seed_paddock))).json()["systems"] == []


async def test_remove_unknown_system_is_404(client, seed_paddock, owner_auth):
    res = await client.delete(f"{_systems_url(seed_paddock)}/{uuid4()}", headers=owner_auth)
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_type"] == "System"


async def test_pop_last_system(client, seed_paddock, owner_auth, intruder_auth):
    await _append(client, seed_paddock, "a")
    await _append(client, seed_paddock, "b")
    url = f"{_systems_url(seed_paddock)}/last"

    assert (await client.delete(url, headers=intruder_auth)).status_code == 403
    assert (await client.delete(url, headers=owner_auth)).status_code == 204
    systems = (await client.get(_systems_url(seed_paddock))).json()["systems"]
    assert [s["title"] for s in systems] == ["a"]
