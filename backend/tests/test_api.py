import io

from sharer.domain.exceptions import StorageError
from sharer.dependencies import page_repository
from sharer.models.page import Page
from sharer.utils.pagination import MAX_PAGE

HTML = "<!DOCTYPE html>\n<html><head><title>Test Page</title></head><body><h1>Hello World!</h1></body></html>"


def share(client, html=HTML, **extra):
    return client.post("/api/v1/share", json={"html_content": html, **extra})


def test_health(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_share_and_serve_verbatim(client):
    resp = share(client)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["url"] == f"/shared/{body['slug']}"
    assert len(body["slug"]) == 8

    shared = client.get(body["url"])
    assert shared.status_code == 200
    assert shared.mimetype == "text/html"
    assert shared.get_data(as_text=True) == HTML


def test_share_blank_content_is_400_and_stores_nothing(client):
    resp = share(client, html="   \n ")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No HTML content provided"}
    assert page_repository().count() == 0


def test_share_invalid_json(client):
    resp = client.post("/api/v1/share", data="not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid JSON"}


def test_share_non_string_content_is_400(client):
    for body in ({"html_content": 123}, {"html_content": ["<p>x</p>"]}):
        resp = client.post("/api/v1/share", json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "HTML content must be a string"}

    assert page_repository().count() == 0


def test_share_non_string_title_is_400(client):
    resp = share(client, title=5)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Title must be a string"}
    assert page_repository().count() == 0


def test_legacy_share_endpoint(client):
    resp = client.post("/api/share", json={"html_content": "<p>legacy</p>"})
    assert resp.status_code == 201
    assert client.get(resp.get_json()["url"]).get_data(as_text=True) == "<p>legacy</p>"


def test_missing_slug_is_404(client):
    resp = client.get("/shared/zzzzzzzz")
    assert resp.status_code == 404
    assert "404" in resp.get_data(as_text=True)

    api = client.get("/api/v1/pages/zzzzzzzz")
    assert api.status_code == 404
    assert api.get_json() == {"error": "Page not found"}


def test_storage_failure_is_500_json(client, monkeypatch):
    def boom(page):
        raise StorageError("Error saving content")

    monkeypatch.setattr(page_repository(), "create", boom)

    resp = share(client)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Error saving content"}


def test_exhausted_slug_retries_is_500_json(client, monkeypatch):
    monkeypatch.setattr(page_repository(), "exists", lambda slug: True)

    resp = share(client)

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Error generating unique slug"}
    assert page_repository().count() == 0


def test_duplicate_slug_insert_is_storage_error(app):
    repo = page_repository()
    for html in ("<p>a</p>", "<p>b</p>"):
        page = Page()
        page.slug = "sameSlug"
        page.html_content = html
        try:
            repo.create(page)
        except StorageError:
            break
    else:
        raise AssertionError("second insert should have failed")

    assert repo.count() == 1


def test_form_submission_redirects_with_success(client):
    resp = client.post("/", data={"htmlContent": "<h1>Form</h1>"})

    assert resp.status_code == 303
    location = resp.headers["Location"]
    assert "success=" in location
    slug = location.rsplit("success=", 1)[1]
    assert client.get(f"/shared/{slug}").get_data(as_text=True) == "<h1>Form</h1>"


def test_form_file_upload(client):
    data = {"htmlFile": (io.BytesIO(b"<h1>From file</h1>"), "page.html")}
    resp = client.post("/", data=data, content_type="multipart/form-data", headers={"Accept": "application/json"})

    assert resp.status_code == 201
    assert client.get(resp.get_json()["url"]).get_data(as_text=True) == "<h1>From file</h1>"


def test_form_textarea_wins_over_file(client):
    data = {
        "htmlContent": "<p>textarea</p>",
        "htmlFile": (io.BytesIO(b"<p>file</p>"), "page.html"),
    }
    resp = client.post("/", data=data, content_type="multipart/form-data", headers={"Accept": "application/json"})

    assert client.get(resp.get_json()["url"]).get_data(as_text=True) == "<p>textarea</p>"


def test_form_rejects_non_html_upload(client):
    data = {"htmlFile": (io.BytesIO(b"plain"), "notes.txt")}
    resp = client.post("/", data=data, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert "Please upload an HTML file" in resp.get_data(as_text=True)


def test_form_empty_submission_renders_error(client):
    resp = client.post("/", data={"htmlContent": "  "})

    assert resp.status_code == 400
    assert "No HTML content provided" in resp.get_data(as_text=True)


def test_htmx_submission_returns_fragment(client):
    resp = client.post("/", data={"htmlContent": "<p>x</p>"}, headers={"HX-Request": "true"})

    assert resp.status_code == 200
    text = resp.get_data(as_text=True)
    assert "http://localhost/shared/" in text
    assert "<html" not in text


def test_pages_listing_pagination(client):
    for i in range(5):
        share(client, html=f"<h1>Page {i}</h1>")

    resp = client.get("/api/v1/pages?page=2&page_size=2")
    body = resp.get_json()

    assert resp.status_code == 200
    assert len(body["items"]) == 2
    assert body["pagination"] == {
        "page": 2,
        "page_size": 2,
        "total": 5,
        "total_pages": 3,
        "has_next": True,
        "has_prev": True,
    }
    assert [item["title"] for item in body["items"]] == ["Page 2", "Page 1"]


def test_pages_listing_normalizes_bad_params(client):
    share(client)
    body = client.get("/api/v1/pages?page=-4&page_size=500").get_json()
    assert body["pagination"]["page"] == 1
    assert body["pagination"]["page_size"] == 20


def test_pages_listing_far_past_the_end_is_empty(client):
    share(client)
    resp = client.get("/api/v1/pages?page=99999999999999999999")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["items"] == []
    assert body["pagination"]["page"] == MAX_PAGE
    assert body["pagination"]["has_prev"] is True
    assert body["pagination"]["has_next"] is False


def test_pages_listing_invalid_category_is_400(client):
    assert client.get("/api/v1/pages?category=abc").status_code == 400


def test_category_filter(client):
    cat = client.post("/api/v1/categories", json={"name": "Demos"}).get_json()["category"]
    share(client, html="<p>in</p>", category_id=cat["id"])
    share(client, html="<p>out</p>")

    body = client.get(f"/api/v1/pages?category={cat['id']}").get_json()

    assert body["pagination"]["total"] == 1
    assert body["items"][0]["category_name"] == "Demos"
    assert client.get("/api/v1/pages").get_json()["pagination"]["total"] == 2


def test_share_with_unknown_category_is_400(client):
    resp = share(client, category_id=999)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Category not found"}


def test_update_page_with_optimistic_lock(client):
    slug = share(client).get_json()["slug"]

    stale = client.put(
        f"/api/v1/pages/{slug}",
        json={"title": "Stale"},
        headers={"If-Unmodified-Since": "Mon, 01 Jan 2001 00:00:00 GMT"},
    )
    assert stale.status_code == 409

    fresh = client.put(
        f"/api/v1/pages/{slug}",
        json={"html_content": "<p>edited</p>", "title": "Edited"},
        headers={"If-Unmodified-Since": "Fri, 01 Jan 2100 00:00:00 GMT"},
    )
    assert fresh.status_code == 200
    assert fresh.get_json()["slug"] == slug
    assert client.get(f"/shared/{slug}").get_data(as_text=True) == "<p>edited</p>"


def test_update_page_bad_lock_header(client):
    slug = share(client).get_json()["slug"]
    resp = client.put(f"/api/v1/pages/{slug}", json={"title": "x"}, headers={"If-Unmodified-Since": "whenever"})
    assert resp.status_code == 400


def test_delete_page(client):
    slug = share(client).get_json()["slug"]

    assert client.delete(f"/api/v1/pages/{slug}").status_code == 200
    assert client.get(f"/shared/{slug}").status_code == 404
    assert client.delete(f"/api/v1/pages/{slug}").status_code == 404


def test_category_crud(client):
    created = client.post("/api/v1/categories", json={"name": " Demos ", "description": "d"})
    assert created.status_code == 201
    cat = created.get_json()["category"]
    assert cat["name"] == "Demos"

    dup = client.post("/api/v1/categories", json={"name": "Demos"})
    assert dup.status_code == 400
    assert dup.get_json() == {"error": "Category name already exists"}

    assert client.post("/api/v1/categories", json={"name": "demos"}).status_code == 201

    updated = client.put(f"/api/v1/categories/{cat['id']}", json={"description": "  new "})
    assert updated.get_json()["category"]["description"] == "new"

    listing = client.get("/api/v1/categories").get_json()
    assert [c["name"] for c in listing["items"]] == ["Demos", "demos"]

    assert client.get("/api/v1/categories/999").status_code == 404


def test_category_delete_detaches_pages(client):
    cat = client.post("/api/v1/categories", json={"name": "Temp"}).get_json()["category"]
    slug = share(client, category_id=cat["id"]).get_json()["slug"]

    resp = client.delete(f"/api/v1/categories/{cat['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["detached_pages"] == 1

    page = client.get(f"/api/v1/pages/{slug}").get_json()
    assert page["category_id"] is None
    assert page["category_name"] is None
    assert client.get(f"/api/v1/categories/{cat['id']}").status_code == 404

    # A deleted name is free again
    assert client.post("/api/v1/categories", json={"name": "Temp"}).status_code == 201


def test_category_options_fragment_escapes_names(client):
    client.post("/api/v1/categories", json={"name": "<b>Bold</b>"})

    resp = client.get("/categories/options")
    text = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert text.startswith('<option value="">Select a category...</option>')
    assert "&lt;b&gt;Bold&lt;/b&gt;" in text


def test_category_form_flow(client):
    resp = client.post("/categories", data={"name": "Web"})
    assert resp.status_code == 303

    listing = client.get("/categories")
    assert "Web" in listing.get_data(as_text=True)

    cat = client.get("/api/v1/categories").get_json()["items"][0]
    assert client.get(f"/categories/{cat['id']}/edit").status_code == 200
    assert client.post(f"/categories/{cat['id']}", data={"name": "Web2"}).status_code == 303
    assert client.post(f"/categories/{cat['id']}/delete").status_code == 303
    assert client.get("/api/v1/categories").get_json()["pagination"]["total"] == 0


def test_html_pages_render(client):
    share(client)
    assert client.get("/").status_code == 200
    assert client.get("/?success=abcdefgh").status_code == 200
    assert "Test Page" in client.get("/pages").get_data(as_text=True)
    assert client.get("/categories/new").status_code == 200


def test_openapi_document_is_served(client):
    resp = client.get("/openapi/sharer.yaml")
    assert resp.status_code == 200
    assert b"HTML Sharer API" in resp.data


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert "Initialized the database." in result.output


def test_memory_backend_serves_the_same_api():
    from sharer import create_app

    app = create_app("testing", REPOSITORY_BACKEND="memory")
    client = app.test_client()

    resp = client.post("/api/v1/share", json={"html_content": "<p>in memory</p>"})
    assert resp.status_code == 201
    assert client.get(resp.get_json()["url"]).get_data(as_text=True) == "<p>in memory</p>"
    assert client.get("/api/v1/pages").get_json()["pagination"]["total"] == 1
