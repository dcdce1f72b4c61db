from fastapi import status


def test_redirect_and_click(client, store):
    store.add("gh", "https://github.com")

    response = client.get("/gh", follow_redirects=False)

    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "https://github.com"
    assert store.get("gh").click_count == 1


def test_redirect_nested_shortcut(client, store):
    store.add("docs/py", "https://docs.python.org")

    response = client.get("/docs/py", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "https://docs.python.org"


def test_unknown_shortcut_is_404(client, store):
    response = client.get("/nope", follow_redirects=False)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert store.list() == []


def test_root_goes_to_management(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/_"


def test_management_page_lists_links(client, store):
    store.add("gh", "https://github.com", "GitHub <home>")
    store.increment_clicks("gh")

    response = client.get("/_")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "https://github.com" in response.text
    assert "GitHub &lt;home&gt;" in response.text
    assert "Total Clicks: 1" in response.text
    assert store.get("gh").click_count == 1


def test_unknown_management_path_is_not_a_shortcut(client):
    response = client.get("/_/nothing", follow_redirects=False)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_add_form(client, store):
    response = client.post(
        "/_/add",
        data={"shortcut": "gh", "url": "https://github.com", "description": "GitHub"},
        follow_redirects=False,
    )

    assert response.status_code == status.HTTP_302_FOUND
    assert response.headers["location"] == "/_"
    assert store.get("gh").description == "GitHub"


def test_add_form_duplicate(client, store):
    store.add("gh", "https://github.com")

    response = client.post("/_/add", data={"shortcut": "gh", "url": "https://gitlab.com"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text.startswith("Error:")
    assert store.get("gh").url == "https://github.com"


def test_add_form_missing_fields(client, store):
    response = client.post("/_/add", data={"shortcut": "gh"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == "Missing shortcut or URL"
    assert store.get("gh") is None


def test_delete_form(client, store):
    store.add("gh", "https://github.com")

    response = client.post("/_/delete", data={"shortcut": "gh"}, follow_redirects=False)

    assert response.status_code == status.HTTP_302_FOUND
    assert store.get("gh") is None

    # deleting again is not an error
    response = client.post("/_/delete", data={"shortcut": "gh"}, follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND


def test_delete_form_missing_shortcut(client):
    response = client.post("/_/delete", data={})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_api_links(client, store):
    response = client.post(
        "/_/api/links", json={"shortcut": "gh", "url": "https://github.com"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["click_count"] == 0

    response = client.post(
        "/_/api/links", json={"shortcut": "gh", "url": "https://github.com"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post("/_/api/links", json={"shortcut": "", "url": "https://x.org"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    client.post("/_/api/links", json={"shortcut": "py", "url": "https://python.org"})
    response = client.get("/_/api/links")
    assert [item["shortcut"] for item in response.json()] == ["py", "gh"]

    response = client.patch("/_/api/links/gh", json={"url": "https://github.com/explore"})
    assert response.status_code == 200
    assert response.json()["url"] == "https://github.com/explore"

    response = client.get("/_/api/links/gh")
    assert response.json()["url"] == "https://github.com/explore"

    response = client.delete("/_/api/links/gh")
    assert response.json() == {"ok": True, "detail": "Link 'gh' deleted"}

    assert client.get("/_/api/links/gh").status_code == 404
    assert client.delete("/_/api/links/gh").status_code == 404
    assert client.patch("/_/api/links/gh", json={"url": "https://x.org"}).status_code == 404


def test_api_stats(client, store):
    for name, clicks in (("a", 3), ("b", 7), ("c", 1)):
        store.add(name, f"https://example.com/{name}")
        for _ in range(clicks):
            store.increment_clicks(name)

    data = client.get("/_/api/stats").json()

    assert data["total_links"] == 3
    assert data["total_clicks"] == 11
    assert data["most_clicked"]["shortcut"] == "b"


def test_storage_failure_is_500(client, store):
    store.close()

    assert client.get("/_/api/links").status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert client.get("/gh", follow_redirects=False).status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert client.get("/_/health").json() == {"status": "closed"}
