"""Tests for logo and carousel media endpoints."""

import asyncio

from fastapi.testclient import TestClient

from adoption_service.app.crud import media_crud
from adoption_service.app.models import Media


class TestGetMedia:
    """Tests for GET /api/media"""

    def test_empty(self, client: TestClient):
        response = client.get("/api/media")

        assert response.status_code == 200
        assert response.json() == {"logo": None, "carousel": []}

    def test_crud_gathers_logo_and_carousel(self, app, db, uploads, make_upload):
        media_crud.set_logo(db, uploads, make_upload(name="logo.png"))
        media_crud.add_carousel_image(db, uploads, make_upload(), caption="Cortile")

        media = asyncio.run(media_crud.get_media(app.state.session_factory))

        assert media.logo.startswith("/uploads/logo-")
        assert [image.caption for image in media.carousel] == ["Cortile"]


class TestLogo:
    """Tests for POST /api/media/logo"""

    def test_latest_logo_wins(self, client: TestClient, db, png_file):
        first = client.post("/api/media/logo", files=png_file(field="logo")).json()["url"]
        second = client.post("/api/media/logo", files=png_file(field="logo")).json()["url"]

        assert first != second
        assert client.get("/api/media").json()["logo"] == second
        active = db.query(Media).filter(Media.type == "logo", Media.active == True).all()
        assert [m.url for m in active] == [second]
        assert db.query(Media).filter(Media.type == "logo").count() == 2

    def test_missing_file_is_400(self, client: TestClient):
        response = client.post("/api/media/logo", data={"caption": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "No file uploaded"


class TestCarousel:
    """Tests for POST/DELETE /api/media/carousel"""

    def test_upload_returns_id_and_url(self, client: TestClient, png_file):
        response = client.post(
            "/api/media/carousel",
            data={"caption": "Cortile", "description": "Il nuovo cortile", "position": "2"},
            files=png_file(),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["url"].startswith("/uploads/image-")
        image = client.get("/api/media").json()["carousel"][0]
        assert image["caption"] == "Cortile"
        assert image["description"] == "Il nuovo cortile"
        assert image["position"] == 2

    def test_ordered_by_position_then_creation(self, client: TestClient, png_file):
        for caption, position in [("c", "1"), ("a", "0"), ("d", "1"), ("b", None)]:
            data = {"caption": caption}
            if position is not None:
                data["position"] = position
            client.post("/api/media/carousel", data=data, files=png_file())

        carousel = client.get("/api/media").json()["carousel"]

        assert [image["caption"] for image in carousel] == ["a", "b", "c", "d"]

    def test_invalid_position_defaults_to_zero(self, client: TestClient, png_file):
        client.post("/api/media/carousel", data={"position": "first"}, files=png_file())

        assert client.get("/api/media").json()["carousel"][0]["position"] == 0

    def test_missing_file_is_400(self, client: TestClient):
        response = client.post("/api/media/carousel", data={"caption": "x"})

        assert response.status_code == 400

    def test_delete_deactivates_and_second_delete_is_404(self, client: TestClient, db, png_file):
        image_id = client.post("/api/media/carousel", files=png_file()).json()["id"]

        first = client.delete(f"/api/media/carousel/{image_id}")
        second = client.delete(f"/api/media/carousel/{image_id}")

        assert first.status_code == 200
        assert first.json() == {"success": True, "id": image_id}
        assert second.status_code == 404
        assert client.get("/api/media").json()["carousel"] == []
        # soft delete keeps the row
        row = db.get(Media, image_id)
        assert row is not None and row.active is False

    def test_delete_does_not_touch_logo(self, client: TestClient, png_file):
        client.post("/api/media/logo", files=png_file(field="logo"))

        response = client.delete("/api/media/carousel/1")

        assert response.status_code == 404
        assert client.get("/api/media").json()["logo"] is not None

    def test_delete_unknown_is_404(self, client: TestClient):
        response = client.delete("/api/media/carousel/123")

        assert response.status_code == 404
        assert response.json()["message"] == "Image not found"
