"""Tests for the search and catalogue item endpoints."""
from decimal import Decimal


def _flight_query(**overrides):
    body = {"from": "Delhi", "to": "Mumbai", "departureDate": "2026-12-15", "passengers": 1}
    body.update(overrides)
    return body


class TestFlightSearchAPI:
    async def test_missing_field_is_400(self, client, db_session):
        response = await client.post("/api/flights/search", json={"to": "Mumbai", "departureDate": "2026-12-15"})

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid search parameters"
        assert any("from" in error["loc"] for error in data["errors"])

    async def test_zero_passengers_is_400(self, client, db_session):
        response = await client.post("/api/flights/search", json=_flight_query(passengers=0))
        assert response.status_code == 400

    async def test_unknown_seat_class_is_400(self, client, db_session):
        response = await client.post("/api/flights/search", json=_flight_query(seatClass="sleeper"))
        assert response.status_code == 400

    async def test_no_matches_is_empty_list(self, client, db_session):
        response = await client.post("/api/flights/search", json=_flight_query())

        assert response.status_code == 200
        assert response.json() == []

    async def test_seat_availability_scenario(self, client, make_flight):
        make_flight(available_seats=5)

        two = await client.post("/api/flights/search", json=_flight_query(passengers=2))
        ten = await client.post("/api/flights/search", json=_flight_query(passengers=10))

        assert len(two.json()) == 1
        assert ten.json() == []

    async def test_response_shape_is_camel_case(self, client, make_flight):
        flight = make_flight()
        response = await client.post("/api/flights/search", json=_flight_query(**{"from": "delhi"}))

        assert response.status_code == 200
        result = response.json()[0]
        assert result["id"] == flight.id
        assert result["flightNumber"] == "201"
        assert result["seatClass"] == "economy"
        assert result["availableSeats"] == 5
        assert result["airline"]["code"] == "6E"
        assert result["fromDestination"]["city"] == "New Delhi"
        assert result["toDestination"]["name"] == "Mumbai"
        assert Decimal(str(result["price"])) == Decimal("4500")

    async def test_get_flight(self, client, make_flight):
        flight = make_flight()
        response = await client.get(f"/api/flights/{flight.id}")

        assert response.status_code == 200
        assert response.json()["flightNumber"] == "201"
        assert response.json()["duration"] == 135

    async def test_get_unknown_flight_is_404(self, client, db_session):
        response = await client.get("/api/flights/does-not-exist")

        assert response.status_code == 404
        assert response.json()["detail"] == "Flight not found"


class TestHotelSearchAPI:
    async def test_checkout_before_checkin_is_400(self, client, db_session):
        response = await client.post(
            "/api/hotels/search",
            json={"destination": "Goa", "checkInDate": "2026-12-18", "checkOutDate": "2026-12-15"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid search parameters"

    async def test_search_and_get(self, client, make_hotel):
        hotel = make_hotel()
        response = await client.post(
            "/api/hotels/search",
            json={"destination": "goa", "checkInDate": "2026-12-15", "checkOutDate": "2026-12-18",
                  "guests": 2, "rooms": 1},
        )

        assert response.status_code == 200
        results = response.json()
        assert [r["id"] for r in results] == [hotel.id]
        assert results[0]["destination"]["city"] == "Panaji"

        detail = await client.get(f"/api/hotels/{hotel.id}")
        assert detail.status_code == 200
        assert detail.json()["availableRooms"] == 10

    async def test_get_unknown_hotel_is_404(self, client, db_session):
        response = await client.get("/api/hotels/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Hotel not found"


class TestTrainAndBusSearchAPI:
    async def test_train_search(self, client, make_train):
        train = make_train()
        response = await client.post(
            "/api/trains/search",
            json={"from": "delhi", "to": "mumbai", "journeyDate": "2026-12-15", "seatClass": "sleeper"},
        )

        assert response.status_code == 200
        results = response.json()
        assert [r["trainNumber"] for r in results] == ["12952"]
        assert results[0]["fromDestinationId"] == train.from_destination_id

    async def test_train_search_rejects_flight_class(self, client, db_session):
        response = await client.post(
            "/api/trains/search",
            json={"from": "delhi", "to": "mumbai", "journeyDate": "2026-12-15", "seatClass": "business"},
        )
        assert response.status_code == 400

    async def test_bus_search(self, client, make_bus):
        make_bus()
        response = await client.post(
            "/api/buses/search",
            json={"from": "Mumbai", "to": "Panaji", "journeyDate": "2026-12-15", "passengers": 2},
        )

        assert response.status_code == 200
        assert response.json()[0]["operatorName"] == "VRL Travels"

    async def test_get_unknown_bus_and_train(self, client, db_session):
        bus = await client.get("/api/buses/missing")
        train = await client.get("/api/trains/missing")

        assert bus.status_code == 404
        assert train.status_code == 404
