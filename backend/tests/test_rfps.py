from conftest import create_rfp


def test_list_empty(client):
    r = client.get("/api/rfps")
    assert r.status_code == 200
    assert r.json() == []


def test_create_then_list_once(client):
    r = client.post("/api/rfps", json={"title": "Laptops", "description": "40 developer laptops"})
    assert r.status_code == 201
    assert r.json()["message"] == "RFP created successfully"
    rfp_id = r.json()["rfpId"]

    rfps = client.get("/api/rfps").json()
    matching = [x for x in rfps if x["id"] == rfp_id]
    assert len(matching) == 1
    assert matching[0]["title"] == "Laptops"
    assert matching[0]["description"] == "40 developer laptops"
    assert matching[0]["createdAt"]


def test_list_in_insertion_order(client):
    ids = [create_rfp(client, title=t) for t in ("first", "second", "third")]
    listed = client.get("/api/rfps").json()
    assert [x["id"] for x in listed] == ids
    assert [x["title"] for x in listed] == ["first", "second", "third"]
