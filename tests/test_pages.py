import pytest

DB_TROUBLE = "trouble connecting to our database"


@pytest.mark.asyncio
async def test_home_lists_published_content(client, seed_directory):
    r = await client.get("/")
    assert r.status_code == 200
    assert "Nord" in r.text
    assert "Lakay Restaurant" in r.text
    assert "Carnival" in r.text
    # unpublished content stays hidden
    assert "Hidden Kitchen" not in r.text
    assert "/dept/sud" not in r.text


@pytest.mark.asyncio
async def test_home_falls_back_when_database_is_down(offline_client):
    r = await offline_client.get("/")
    assert r.status_code == 200
    assert DB_TROUBLE in r.text


@pytest.mark.asyncio
async def test_departments_page(client, seed_directory):
    r = await client.get("/departments")
    assert r.status_code == 200
    assert "/dept/nord" in r.text
    assert "/dept/sud" not in r.text


@pytest.mark.asyncio
async def test_department_page_lists_cities(client, seed_directory):
    r = await client.get("/dept/nord")
    assert r.status_code == 200
    assert "Cap-Haïtien" in r.text


@pytest.mark.asyncio
async def test_unpublished_department_is_not_found(client, seed_directory):
    r = await client.get("/dept/sud")
    assert r.status_code == 404

    r = await client.get("/dept/sud/city/les-cayes")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_missing_department_is_not_found(client, seed_directory):
    r = await client.get("/dept/nowhere")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_department_page_renders_error_when_database_is_down(offline_client):
    r = await offline_client.get("/dept/nord")
    assert r.status_code == 503
    assert DB_TROUBLE in r.text


@pytest.mark.asyncio
async def test_city_page(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien")
    assert r.status_code == 200
    assert "Toussaint Louverture" in r.text
    assert "Carnival" in r.text
    assert "1 UNESCO site" in r.text


@pytest.mark.asyncio
async def test_cities_page_groups_and_searches(client, seed_directory):
    r = await client.get("/cities")
    assert r.status_code == 200
    assert "Cap-Haïtien" in r.text
    # city of an unpublished department is left out
    assert "Les Cayes" not in r.text

    r = await client.get("/cities", params={"q": "haitien"})
    assert "Cap-Haïtien" in r.text


@pytest.mark.asyncio
async def test_cities_page_falls_back_to_static_regions(offline_client):
    r = await offline_client.get("/cities")
    assert r.status_code == 200
    assert DB_TROUBLE in r.text
    assert "Jacmel" in r.text


@pytest.mark.asyncio
async def test_map_lists_departments(client):
    r = await client.get("/map")
    assert r.status_code == 200
    assert "/dept/nord-ouest" in r.text


@pytest.mark.asyncio
async def test_restaurants_page_filters(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien/restaurants")
    assert r.status_code == 200
    assert "Lakay Restaurant" in r.text
    assert "Iron Market" in r.text
    assert "Hidden Kitchen" not in r.text

    r = await client.get("/dept/nord/city/cap-haitien/restaurants", params={"type": "shop"})
    assert "Iron Market" in r.text
    assert "Lakay Restaurant" not in r.text
    assert "Showing 1 of 2 establishments" in r.text


@pytest.mark.asyncio
async def test_restaurant_detail(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien/restaurants/lakay")
    assert r.status_code == 200
    assert "Seaside Haitian cuisine" in r.text

    r = await client.get("/dept/nord/city/cap-haitien/restaurants/hidden")
    assert r.status_code == 404

    # a hotel is not a restaurant
    r = await client.get("/dept/nord/city/cap-haitien/restaurants/hotel-roi")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_landmarks(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien/landmarks")
    assert r.status_code == 200
    assert "Citadelle Laferrière" in r.text

    r = await client.get("/dept/nord/city/cap-haitien/landmarks/citadelle")
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_city_rentals_page(client, seed_directory):
    r = await client.get("/dept/nord/city/cap-haitien/rentals", params={"sort": "price_high"})
    assert r.status_code == 200
    assert "Hotel du Roi" in r.text


@pytest.mark.asyncio
async def test_rental_detail_quotes_stay(client, seed_directory):
    r = await client.get(
        "/dept/nord/city/cap-haitien/rentals/hotel-roi",
        params={"check_in": "2026-03-01", "check_out": "2026-03-03", "guests": "3"},
    )
    assert r.status_code == 200
    # $$$ is 150 a night; two nights plus 15% fee and 10% tax
    assert "$150.00" in r.text
    assert "$300.00" in r.text
    assert "$375.00" in r.text
    assert "Request to Book" in r.text
    assert "Booking Request" not in r.text


@pytest.mark.asyncio
async def test_rental_booking_request_summary(client, seed_directory):
    r = await client.get(
        "/dept/nord/city/cap-haitien/rentals/hotel-roi",
        params={"check_in": "2026-03-01", "check_out": "2026-03-03", "request_booking": "true"},
    )
    assert r.status_code == 200
    assert "Booking Request" in r.text


@pytest.mark.asyncio
async def test_rental_detail_ignores_reversed_dates(client, seed_directory):
    r = await client.get(
        "/dept/nord/city/cap-haitien/rentals/hotel-roi",
        params={"check_in": "2026-03-05", "check_out": "2026-03-01"},
    )
    assert r.status_code == 200
    assert "Select a check-out date after check-in" in r.text


@pytest.mark.asyncio
async def test_rentals_directory(client, seed_directory):
    r = await client.get("/rentals")
    assert r.status_code == 200
    assert "Hotel du Roi" in r.text
    assert "Iron Market" in r.text
    assert "Lakay Restaurant" not in r.text

    r = await client.get("/rentals", params={"type": "hotel"})
    assert "Hotel du Roi" in r.text
    assert "Iron Market" not in r.text


@pytest.mark.asyncio
async def test_rentals_directory_falls_back_when_database_is_down(offline_client):
    r = await offline_client.get("/rentals")
    assert r.status_code == 200
    assert DB_TROUBLE in r.text


@pytest.mark.asyncio
async def test_figure_page_parses_json_lists(client, seed_directory):
    figure = seed_directory["figure"]
    r = await client.get(f"/figure/{figure.id}")
    assert r.status_code == 200
    assert "The tree of liberty will grow back" in r.text
    # invalid JSON in monuments renders as an empty section, not an error
    assert "Monuments" not in r.text


@pytest.mark.asyncio
async def test_unknown_figure_is_not_found(client, seed_directory):
    r = await client.get("/figure/fig_missing")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_about_page(client):
    r = await client.get("/about")
    assert r.status_code == 200
