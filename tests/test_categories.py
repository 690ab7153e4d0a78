def test_create_and_list_categories(client, alice_headers):
    response = client.post("/api/category/", json={"name": "Street"}, headers=alice_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Add category success!"
    assert data["category"]["name"] == "Street"

    listing = client.get("/api/category/").json()
    assert listing["success"] is True
    assert listing["categories"] == [data["category"]]


def test_create_category_requires_name(client, alice_headers):
    response = client.post("/api/category/", json={"name": ""}, headers=alice_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Name is required"}


def test_create_category_requires_token(client):
    response = client.post("/api/category/", json={"name": "Street"})

    assert response.status_code == 401


def test_created_category_is_expanded_on_photo_reads(client, alice, alice_headers):
    category = client.post("/api/category/", json={"name": "Macro"}, headers=alice_headers).json()["category"]
    body = {"categoryId": category["id"], "path": "bug.jpg", "title": "Bug", "userId": alice.id, "is_public": True}
    client.post("/api/photo/", json=body, headers=alice_headers)

    photos = client.get("/api/photo/public").json()["photos"]

    assert photos[0]["category"] == {"id": category["id"], "name": "Macro"}
