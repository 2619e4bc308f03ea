"""Locomotive and health route tests — HTTP contract through FastAPI + httpx.

Tests cover:
    - GET list: default page, search, repeated filter params, order_by validation, pg clamping
    - GET tags and details (404 envelope for unknown ids)
    - POST 201 with id, 400 on invalid body
    - PUT id mismatch → 400, success → updated details
    - DELETE 204 then 404
    - Liveness and readiness probes
"""

from decimal import Decimal


def _add_body(**overrides) -> dict:
    body = {
        "name": "V 200",
        "price": "229.00",
        "stock_status": {"amount": 2, "next_stock": "2026-12-24"},
        "scale": "H0",
        "epoch": "III",
        "length": 211.0,
        "num_of_axles": 4,
        "control": "digital",
        "loco_type": "diesel",
        "num_of_driven_axles": 4,
        "added_images": [{"url": "https://img.example/v200.jpg"}],
    }
    body.update(overrides)
    return body


class TestListRoute:

    async def test_default_list(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives")
        assert resp.status_code == 200
        data = resp.json()
        assert [i["name"] for i in data["items"]] == [
            "Big Boy", "BR 110", "BR 218", "Köf II",
        ]
        assert data["page_number"] == 1
        assert data["number_of_pages"] == 1

    async def test_list_row_shape(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives", params={"search": "218"})
        row = resp.json()["items"][0]
        assert Decimal(row["price"]) == Decimal("189.00")
        assert row["railway_company_name"] == "DB"
        assert row["stock_status"] == {"amount": 5, "next_stock": "2026-12-01"}
        assert row["scale"] == "H0"

    async def test_repeated_tag_params(self, client, seed_catalogue):
        resp = await client.get(
            "/api/v1/locomotives",
            params=[("tags", "steam"), ("tags", "electric"), ("order_by", "price_desc")],
        )
        assert [i["name"] for i in resp.json()["items"]] == ["Big Boy", "BR 110"]

    async def test_enum_filter(self, client, seed_catalogue):
        resp = await client.get(
            "/api/v1/locomotives", params={"controls": "analog"},
        )
        assert [i["name"] for i in resp.json()["items"]] == ["Köf II"]

    async def test_unknown_order_by_is_400(self, client, seed_catalogue):
        resp = await client.get(
            "/api/v1/locomotives", params={"order_by": "cheapest"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_ORDER_BY"

    async def test_unknown_scale_is_400(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives", params={"scales": "HO"})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_page_number_clamped(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives", params={"pg": 9})
        assert resp.status_code == 200
        assert resp.json()["page_number"] == 1

    async def test_empty_catalogue(self, client):
        resp = await client.get("/api/v1/locomotives")
        assert resp.json() == {"items": [], "page_number": 1, "number_of_pages": 1}


class TestTagsAndDetailsRoutes:

    async def test_tags(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives/tags")
        assert resp.status_code == 200
        assert resp.json() == ["diesel", "electric", "steam"]

    async def test_details(self, client, seed_catalogue):
        loco_id = seed_catalogue["br110"].id
        resp = await client.get(f"/api/v1/locomotives/{loco_id}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == loco_id
        assert data["railway_company_country_name"] == "Germany"
        assert data["stock_status"]["amount"] == 0

    async def test_details_not_found(self, client, seed_catalogue):
        resp = await client.get("/api/v1/locomotives/9999")
        assert resp.status_code == 404
        error = resp.json()["error"]
        assert error["code"] == "RESOURCE_NOT_FOUND"
        assert error["context"]["resource_id"] == "9999"


class TestWriteRoutes:

    async def test_add_returns_201_and_id(self, client, seed_catalogue):
        resp = await client.post("/api/v1/locomotives", json=_add_body(
            tag="diesel", reused_images=[seed_catalogue["spare_image"].id],
        ))
        assert resp.status_code == 201
        new_id = resp.json()["id"]

        details = (await client.get(f"/api/v1/locomotives/{new_id}")).json()
        assert details["name"] == "V 200"
        assert [img["url"] for img in details["images"]] == [
            "https://img.example/spare.jpg", "https://img.example/v200.jpg",
        ]

    async def test_add_invalid_body_is_400(self, client, seed_catalogue):
        resp = await client.post(
            "/api/v1/locomotives", json=_add_body(name="   ", price="-1"),
        )
        assert resp.status_code == 400
        fields = {d["field"] for d in resp.json()["error"]["details"]}
        assert "body.name" in fields
        assert "body.price" in fields

    async def test_add_unknown_reused_image_is_404(self, client, seed_catalogue):
        resp = await client.post(
            "/api/v1/locomotives", json=_add_body(reused_images=[4242]),
        )
        assert resp.status_code == 404

    async def test_edit(self, client, seed_catalogue):
        loco_id = seed_catalogue["big_boy"].id
        resp = await client.put(f"/api/v1/locomotives/{loco_id}", json={
            "id": loco_id, "control": "digital", "loco_type": "steam",
            "auto_coupling": True, "num_of_driven_axles": 8,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["control"] == "digital"
        assert data["auto_coupling"] is True
        assert data["name"] == "Big Boy"

    async def test_edit_id_mismatch_is_400(self, client, seed_catalogue):
        loco_id = seed_catalogue["big_boy"].id
        resp = await client.put(f"/api/v1/locomotives/{loco_id}", json={
            "id": loco_id + 1, "control": "digital", "loco_type": "steam",
        })
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_delete_then_not_found(self, client, seed_catalogue):
        loco_id = seed_catalogue["shunter"].id
        resp = await client.delete(f"/api/v1/locomotives/{loco_id}")
        assert resp.status_code == 204
        assert (await client.get(f"/api/v1/locomotives/{loco_id}")).status_code == 404
        assert (await client.delete(f"/api/v1/locomotives/{loco_id}")).status_code == 404


class TestHealthRoutes:

    async def test_liveness(self, client):
        resp = await client.get("/api/v1/health/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    async def test_readiness(self, client):
        resp = await client.get("/api/v1/health/ready")
        assert resp.status_code == 200
        assert resp.json()["checks"]["database"] == "healthy"
