async def _create_list(client, headers):
    response = await client.post("/lists", json={"title": "Groceries"}, headers=headers)
    return response.json()["id"]


async def test_task_crud(client, auth_headers):
    list_id = await _create_list(client, auth_headers)

    response = await client.get(f"/lists/{list_id}/tasks", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []

    response = await client.post(f"/lists/{list_id}/tasks", json={"title": "Milk"}, headers=auth_headers)
    assert response.status_code == 200
    task = response.json()
    assert task["title"] == "Milk"
    assert task["completed"] is False
    assert task["list_id"] == list_id

    response = await client.patch(f"/lists/{list_id}/tasks/{task['id']}", json={"completed": True},
                                  headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["title"] == "Milk"

    response = await client.get(f"/lists/{list_id}/tasks/{task['id']}", headers=auth_headers)
    assert response.json()["completed"] is True

    response = await client.delete(f"/lists/{list_id}/tasks/{task['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == task["id"]

    response = await client.get(f"/lists/{list_id}/tasks/{task['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_task_must_belong_to_list(client, auth_headers):
    first_list = await _create_list(client, auth_headers)
    second_list = await _create_list(client, auth_headers)

    task = (await client.post(f"/lists/{first_list}/tasks", json={"title": "Milk"},
                              headers=auth_headers)).json()

    response = await client.get(f"/lists/{second_list}/tasks/{task['id']}", headers=auth_headers)
    assert response.status_code == 404


async def test_other_users_task_is_not_found(client, auth_headers):
    list_id = await _create_list(client, auth_headers)
    task = (await client.post(f"/lists/{list_id}/tasks", json={"title": "Milk"},
                              headers=auth_headers)).json()

    other = await client.post("/users", json={"email": "b@x.com", "password": "secret123"})
    other_headers = {"x-access-token": other.headers["x-access-token"]}

    url = f"/lists/{list_id}/tasks/{task['id']}"
    assert (await client.get(url, headers=other_headers)).status_code == 404
    assert (await client.patch(url, json={"completed": True}, headers=other_headers)).status_code == 404
    assert (await client.delete(url, headers=other_headers)).status_code == 404

    response = await client.get(url, headers=auth_headers)
    assert response.json()["completed"] is False


async def test_task_blank_title_rejected(client, auth_headers):
    list_id = await _create_list(client, auth_headers)

    response = await client.post(f"/lists/{list_id}/tasks", json={"title": ""}, headers=auth_headers)
    assert response.status_code == 400
