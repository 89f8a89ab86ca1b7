import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.models.media import Media


def _upload(name="sunset.jpg", data=b"\xff\xd8fake-jpeg"):
    return {"file": (name, data, "image/jpeg")}


@pytest.mark.asyncio
async def test_upload_requires_api_key(client, seed_directory):
    hotel = seed_directory["hotel"]
    r = await client.post(f"/v1/rentals/{hotel.id}/photos", files=_upload())
    assert r.status_code == 401

    r = await client.post(f"/v1/rentals/{hotel.id}/photos", files=_upload(), headers={"X-API-Key": "hg_bogus_key"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_upload_without_file_is_rejected(client, seed_directory, contributor_key):
    hotel = seed_directory["hotel"]
    r = await client.post(
        f"/v1/rentals/{hotel.id}/photos",
        data={"alt": "no file here"},
        headers={"X-API-Key": contributor_key["plain_key"]},
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "No file provided"


@pytest.mark.asyncio
async def test_upload_to_wrong_kind_is_not_found(client, seed_directory, contributor_key):
    headers = {"X-API-Key": contributor_key["plain_key"]}

    # a restaurant is not a rental
    r = await client.post(f"/v1/rentals/{seed_directory['restaurant'].id}/photos", files=_upload(), headers=headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Rental property not found"

    # unpublished restaurant
    r = await client.post(f"/v1/restaurants/{seed_directory['hidden'].id}/photos", files=_upload(), headers=headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Restaurant not found"


@pytest.mark.asyncio
async def test_upload_rental_photo_stores_file_and_media_row(client, db_session, photo_store, seed_directory, contributor_key):
    hotel = seed_directory["hotel"]
    r = await client.post(
        f"/v1/rentals/{hotel.id}/photos",
        files=_upload("../../etc/bay.jpg"),
        headers={"X-API-Key": contributor_key["plain_key"]},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    photo = body["photo"]
    assert photo["alt"] == "Photo of Hotel du Roi"
    assert photo["url"].startswith(f"/uploads/rentals/{hotel.id}/")
    assert photo["url"].endswith("-bay.jpg")

    key = photo["url"].removeprefix("/uploads/")
    assert photo_store.resolve_path(key).read_bytes() == b"\xff\xd8fake-jpeg"

    row = (await db_session.execute(select(Media).where(Media.id == photo["id"]))).scalar_one()
    assert row.bucket == "user-uploads"
    assert row.place_id == hotel.id


@pytest.mark.asyncio
async def test_upload_shop_photo_with_alt_and_list(client, db_session, seed_directory, contributor_key):
    shop = seed_directory["shop"]
    headers = {"X-API-Key": contributor_key["plain_key"]}

    r = await client.post(
        f"/v1/restaurants/{shop.id}/photos",
        files=_upload("stall.png"),
        data={"alt": "Spice stall"},
        headers=headers,
    )
    assert r.status_code == 200, r.text
    assert r.json()["photo"]["alt"] == "Spice stall"

    r = await client.get(f"/v1/restaurants/{shop.id}/photos")
    assert r.status_code == 200
    photos = r.json()["photos"]
    assert [p["alt"] for p in photos] == ["Spice stall"]

    count = (await db_session.execute(select(func.count()).select_from(Media))).scalar_one()
    assert count == 1


@pytest.mark.asyncio
async def test_upload_storage_failure_returns_500(client, seed_directory, contributor_key, photo_store, monkeypatch):
    def _fail(**kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(photo_store, "put_bytes", _fail)

    r = await client.post(
        f"/v1/rentals/{seed_directory['hotel'].id}/photos",
        files=_upload(),
        headers={"X-API-Key": contributor_key["plain_key"]},
    )
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to upload photo"


@pytest.mark.asyncio
async def test_list_photos_failure_returns_500(offline_client):
    r = await offline_client.get("/v1/rentals/plc_any/photos")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to fetch photos"


@pytest.mark.asyncio
async def test_failed_commit_removes_stored_file(client, db_session, seed_directory, contributor_key, photo_store, monkeypatch):
    async def _fail_commit():
        raise OperationalError("COMMIT", {}, ConnectionRefusedError("connection refused"))

    monkeypatch.setattr(db_session, "commit", _fail_commit)

    r = await client.post(
        f"/v1/rentals/{seed_directory['hotel'].id}/photos",
        files=_upload(),
        headers={"X-API-Key": contributor_key["plain_key"]},
    )
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to upload photo"
    assert [p for p in photo_store.base.rglob("*") if p.is_file()] == []


@pytest.mark.asyncio
async def test_upload_with_database_down_returns_json_500(offline_client):
    r = await offline_client.post(
        "/v1/rentals/plc_any/photos",
        files=_upload(),
        headers={"X-API-Key": "hg_abcdefgh_secretpart"},
    )
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json()["detail"] == "Authentication unavailable"
