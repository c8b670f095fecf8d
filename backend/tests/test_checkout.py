"""Tests for the multi-step checkout wizard."""
from datetime import datetime, timedelta
from decimal import Decimal

from yatra.models import Booking, BookingStatus, CheckoutDraft

from payloads import card_payment, flight_passengers, hotel_guests


async def _start(client, headers, item_id, travel_type="flight", **extra):
    body = {"travelType": travel_type, "itemId": item_id, **extra}
    return await client.post("/api/checkout", json=body, headers=headers)


class TestWizardFlow:
    async def test_full_flight_checkout(self, client, db_session, make_flight, auth_headers):
        flight = make_flight(price=Decimal("4500.00"), available_seats=5)
        headers = auth_headers()

        started = await _start(client, headers, flight.id, quantity=2)
        assert started.status_code == 200
        draft = started.json()
        assert draft["step"] == "passengers"
        assert Decimal(str(draft["totalAmount"])) == Decimal("9900")

        passengers = await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": flight_passengers(2)},
            headers=headers,
        )
        assert passengers.status_code == 200
        assert passengers.json()["step"] == "payment"

        paid = await client.post(
            f"/api/checkout/{draft['id']}/payment",
            json={"payment": card_payment()},
            headers=headers,
        )
        assert paid.status_code == 200
        confirmation = paid.json()
        assert confirmation["status"] == "confirmed"
        assert confirmation["quantity"] == 2
        assert Decimal(str(confirmation["totalAmount"])) == Decimal("9900")

        final = await client.get(f"/api/checkout/{draft['id']}", headers=headers)
        assert final.json()["step"] == "confirmed"
        assert final.json()["bookingId"] == confirmation["bookingId"]

        booking = db_session.query(Booking).one()
        assert booking.status == BookingStatus.CONFIRMED
        db_session.refresh(flight)
        assert flight.available_seats == 3

    async def test_hotel_checkout_prices_nights_and_rooms(self, client, make_hotel, auth_headers):
        hotel = make_hotel(price_per_night=Decimal("3000.00"), available_rooms=5)
        headers = auth_headers()

        started = await _start(
            client, headers, hotel.id, travel_type="hotel", quantity=2,
            checkInDate="2026-12-15T14:00:00", checkOutDate="2026-12-18T11:00:00",
        )

        assert started.status_code == 200
        draft = started.json()
        assert Decimal(str(draft["baseAmount"])) == Decimal("18000")
        assert Decimal(str(draft["taxAmount"])) == Decimal("1800")
        assert draft["travelDate"] == "2026-12-15T14:00:00"

        passengers = await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": hotel_guests(rooms=2)},
            headers=headers,
        )
        assert passengers.status_code == 200

        paid = await client.post(
            f"/api/checkout/{draft['id']}/payment",
            json={"payment": {"method": "wallet", "walletType": "Paytm"}},
            headers=headers,
        )
        assert paid.status_code == 200
        assert paid.json()["paymentMethod"] == "Paytm Wallet"
        assert paid.json()["itemSummary"] == "Sea View Residency"

    async def test_passengers_can_be_resubmitted_before_payment(self, client, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()
        url = f"/api/checkout/{draft['id']}/passengers"

        first = await client.put(url, json={"passengerDetails": flight_passengers(1)}, headers=headers)
        again = await client.put(url, json={"passengerDetails": flight_passengers(1)}, headers=headers)

        assert first.status_code == 200
        assert again.status_code == 200
        assert again.json()["step"] == "payment"


class TestWizardOrdering:
    async def test_payment_before_passengers_is_409(self, client, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()

        response = await client.post(
            f"/api/checkout/{draft['id']}/payment", json={"payment": card_payment()}, headers=headers
        )

        assert response.status_code == 409

    async def test_steps_closed_after_confirmation(self, client, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()
        await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": flight_passengers(1)},
            headers=headers,
        )
        await client.post(f"/api/checkout/{draft['id']}/payment", json={"payment": card_payment()}, headers=headers)

        repeat_payment = await client.post(
            f"/api/checkout/{draft['id']}/payment", json={"payment": card_payment()}, headers=headers
        )
        repeat_passengers = await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": flight_passengers(1)},
            headers=headers,
        )

        assert repeat_payment.status_code == 409
        assert repeat_passengers.status_code == 409

    async def test_wrong_passenger_count_is_400(self, client, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id, quantity=2)).json()

        response = await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": flight_passengers(1)},
            headers=headers,
        )

        assert response.status_code == 400

    async def test_malformed_passengers_is_400(self, client, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()
        details = flight_passengers(1)
        details["contact"]["email"] = "not-an-email"

        response = await client.put(
            f"/api/checkout/{draft['id']}/passengers", json={"passengerDetails": details}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid booking data"


class TestWizardDrafts:
    async def test_expired_draft_is_404(self, client, db_session, make_flight, auth_headers):
        flight = make_flight()
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()

        row = db_session.query(CheckoutDraft).filter(CheckoutDraft.id == draft["id"]).one()
        row.expires_at = datetime.utcnow() - timedelta(minutes=1)
        db_session.commit()

        response = await client.get(f"/api/checkout/{draft['id']}", headers=headers)
        assert response.status_code == 404

    async def test_other_users_draft_is_404(self, client, make_flight, auth_headers):
        flight = make_flight()
        draft = (await _start(client, auth_headers(), flight.id)).json()

        response = await client.get(f"/api/checkout/{draft['id']}", headers=auth_headers("user-2"))
        assert response.status_code == 404

    async def test_start_over_capacity_is_409(self, client, make_flight, auth_headers):
        flight = make_flight(available_seats=1)
        response = await _start(client, auth_headers(), flight.id, quantity=3)
        assert response.status_code == 409

    async def test_start_unknown_item_is_404(self, client, db_session, auth_headers):
        response = await _start(client, auth_headers(), "missing")
        assert response.status_code == 404

    async def test_hotel_without_dates_is_400(self, client, make_hotel, auth_headers):
        hotel = make_hotel()
        response = await _start(client, auth_headers(), hotel.id, travel_type="hotel")
        assert response.status_code == 400

    async def test_declined_payment_keeps_draft_open(self, client, db_session, make_flight, auth_headers):
        flight = make_flight(available_seats=5)
        headers = auth_headers()
        draft = (await _start(client, headers, flight.id)).json()
        await client.put(
            f"/api/checkout/{draft['id']}/passengers",
            json={"passengerDetails": flight_passengers(1)},
            headers=headers,
        )

        declined = await client.post(
            f"/api/checkout/{draft['id']}/payment",
            json={"payment": card_payment("4000000000000002")},
            headers=headers,
        )
        assert declined.status_code == 402
        assert db_session.query(Booking).count() == 0

        retry = await client.post(
            f"/api/checkout/{draft['id']}/payment", json={"payment": card_payment()}, headers=headers
        )
        assert retry.status_code == 200
        db_session.refresh(flight)
        assert flight.available_seats == 4

    async def test_requires_auth(self, client, make_flight):
        flight = make_flight()
        response = await client.post("/api/checkout", json={"travelType": "flight", "itemId": flight.id})
        assert response.status_code == 401
