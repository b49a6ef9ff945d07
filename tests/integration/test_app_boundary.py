"""
Boundary tests for the HTTP API: missing, malformed and odd inputs.

Every rejected create and every failed lookup must come back as the same
`{"error": "invalid url"}` body with a 200 status.
"""

import pytest

ERROR = {"error": "invalid url"}


def test_post_missing_url_field(client):
    response = client.post("/api/shorturl", json={})
    assert response.status_code == 200
    assert response.json() == ERROR


def test_post_empty_body(client):
    response = client.post("/api/shorturl")
    assert response.status_code == 200
    assert response.json() == ERROR


def test_post_malformed_json(client):
    response = client.post(
        "/api/shorturl",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == ERROR


@pytest.mark.parametrize("payload", [{"url": 123}, {"url": None}, {"url": ["https://a.example"]}, ["https://a.example"]])
def test_post_non_string_url(client, payload):
    response = client.post("/api/shorturl", json=payload)
    assert response.json() == ERROR


@pytest.mark.parametrize("url", ["", "not-a-url", "www.example.com", "javascript:alert(1)", "https://"])
def test_post_invalid_form_url(client, url):
    response = client.post("/api/shorturl", data={"url": url})
    assert response.json() == ERROR


def test_rejected_posts_do_not_consume_aliases(client):
    client.post("/api/shorturl", json={"url": "ftp://x.com"})
    created = client.post("/api/shorturl", json={"url": "https://ok.example"}).json()
    assert created["short_url"] == 1


@pytest.mark.parametrize("token", ["abc", "1abc", "0", "-1", "1.5", "%20"])
def test_get_non_numeric_alias(client, token):
    client.post("/api/shorturl", json={"url": "https://www.example.com"})
    response = client.get(f"/api/shorturl/{token}", follow_redirects=False)
    assert response.status_code == 200
    assert response.json() == ERROR


def test_get_zero_padded_alias_redirects(client):
    client.post("/api/shorturl", json={"url": "https://www.example.com"})
    response = client.get("/api/shorturl/01", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "https://www.example.com"
