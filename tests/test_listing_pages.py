import pytest


@pytest.mark.asyncio
async def test_listing_form_starts_at_step_one(client):
    r = await client.get("/rentals/list-property")
    assert r.status_code == 200
    assert "Step 1 of 4" in r.text


@pytest.mark.asyncio
async def test_listing_form_blocks_incomplete_step(client):
    r = await client.post("/rentals/list-property", data={"step": "1", "action": "next", "name": "Villa"})
    assert r.status_code == 422
    assert "Price per night is required" in r.text
    assert "Step 1 of 4" in r.text


@pytest.mark.asyncio
async def test_listing_form_walks_through_to_submission(client):
    form = {
        "name": "Ocean View Villa",
        "property_type": "villa",
        "price_per_night": "120",
        "address": "Route de Labadee",
        "description": "Three bedrooms above the bay",
        "email": "owner@example.com",
        "phone": "+509 555 0100",
    }

    r = await client.post("/rentals/list-property", data={**form, "step": "1", "action": "next"})
    assert r.status_code == 200
    assert "Step 2 of 4" in r.text

    r = await client.post("/rentals/list-property", data={**form, "step": "4", "action": "submit"})
    assert r.status_code == 200
    assert "Thank You for Your Submission!" in r.text
    assert "owner@example.com" in r.text


@pytest.mark.asyncio
async def test_city_listing_form(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien/rentals/list-property")
    assert r.status_code == 200
    assert "List your property in Cap-Haïtien" in r.text

    r = await client.get("/dept/sud/city/les-cayes/rentals/list-property")
    assert r.status_code == 404
