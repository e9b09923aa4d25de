"""End-to-end paddock lifecycle: create, fill, prune, rename, delete."""


async def test_paddock_lifecycle(client, owner, owner_auth, intruder_auth):
    created = await client.post(
        "/api/v1/paddocks",
        json={"paddock": {"title": "River flats"}},
        headers=owner_auth,
    )
    assert created.status_code == 201
    paddock = created.json()["paddock"]
    assert paddock["owner"] == str(owner.id)
    assert paddock["steps"] == [] and paddock["systems"] == []
    base = f"/api/v1/paddocks/{paddock['id']}"

    for title in ("Spray", "Sow", "Harvest"):
        res = await client.post(f"{base}/steps", json={"step": {"title": title}})
        assert res.status_code == 201
    res = await client.post(f"{base}/systems", json={"system": {"title": "Pivot"}})
    assert res.status_code == 201

    steps = (await client.get(f"{base}/steps")).json()["steps"]
    assert [s["title"] for s in steps] == ["Spray", "Sow", "Harvest"]

    assert (await client.delete(f"{base}/steps/last", headers=intruder_auth)).status_code == 403
    assert (await client.delete(f"{base}/steps/last", headers=owner_auth)).status_code == 204
    assert (
        await client.delete(f"{base}/steps/{steps[0]['id']}", headers=owner_auth)
    ).status_code == 204

    renamed = await client.patch(
        base, json={"paddock": {"title": "River flats east"}}, headers=owner_auth,
    )
    assert renamed.status_code == 204

    shown = (await client.get(base, headers=owner_auth)).json()["paddock"]
    assert shown["title"] == "River flats east"
    assert [s["title"] for s in shown["steps"]] == ["Sow"]
    assert [s["title"] for s in shown["systems"]] == ["Pivot"]

    assert (await client.delete(base, headers=owner_auth)).status_code == 204
    assert (await client.get(base, headers=owner_auth)).status_code == 404
