"""
Availability search across flights, hotels, trains and buses.

Every search follows the same shape: join the inventory row to its endpoint
destinations, match cities with a case-insensitive substring, restrict
departures to a single calendar day, and drop rows without enough seats or
rooms. Rows come back as plain dicts already shaped for the response models.
"""

import logging
from datetime import date, datetime, time, timedelta

from sqlalchemy import or_
from sqlalchemy.orm import Session, aliased

from yatra.models import Airline, Bus, Destination, Flight, Hotel, SeatClass, Train
from yatra.schemas.search import BusSearch, FlightSearch, HotelSearch, TrainSearch

logger = logging.getLogger(__name__)


def day_window(day: date) -> tuple[datetime, datetime]:
    """Half-open [day 00:00, next day 00:00) window for a calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def contains_pattern(term: str) -> str:
    """ILIKE pattern matching term anywhere, with LIKE wildcards in the term escaped."""
    escaped = term.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _place(destination: Destination) -> dict:
    return {"name": destination.name, "city": destination.city}


class SearchService:

    def __init__(self, db: Session):
        self.db = db

    def _route_query(self, model, from_city: str, to_city: str, day: date):
        from_dest = aliased(Destination, name="from_dest")
        to_dest = aliased(Destination, name="to_dest")
        start, end = day_window(day)

        query = (
            self.db.query(model, from_dest, to_dest)
            .join(from_dest, model.from_destination_id == from_dest.id)
            .join(to_dest, model.to_destination_id == to_dest.id)
            .filter(
                from_dest.city.ilike(contains_pattern(from_city), escape="\\"),
                to_dest.city.ilike(contains_pattern(to_city), escape="\\"),
                model.departure_time >= start,
                model.departure_time < end,
            )
        )
        return query

    def search_flights(self, search: FlightSearch) -> list[dict]:
        query = (
            self._route_query(Flight, search.from_city, search.to_city, search.departure_date)
            .add_entity(Airline)
            .join(Airline, Flight.airline_id == Airline.id)
            .filter(
                Flight.seat_class == SeatClass(search.seat_class),
                Flight.available_seats >= search.passengers,
            )
            .order_by(Flight.departure_time.asc())
        )

        results = []
        for flight, from_dest, to_dest, airline in query.all():
            results.append({
                "id": flight.id,
                "flight_number": flight.flight_number,
                "departure_time": flight.departure_time,
                "arrival_time": flight.arrival_time,
                "duration": flight.duration,
                "price": flight.price,
                "available_seats": flight.available_seats,
                "total_seats": flight.total_seats,
                "seat_class": flight.seat_class,
                "airline": {
                    "name": airline.name,
                    "code": airline.code,
                    "logo_url": airline.logo_url,
                },
                "from_destination": _place(from_dest),
                "to_destination": _place(to_dest),
            })

        logger.info(
            f"Flight search {search.from_city!r} -> {search.to_city!r} on "
            f"{search.departure_date} ({search.seat_class}, {search.passengers} pax): {len(results)} results"
        )
        return results

    def search_trains(self, search: TrainSearch) -> list[dict]:
        query = (
            self._route_query(Train, search.from_city, search.to_city, search.journey_date)
            .filter(
                Train.seat_class == SeatClass(search.seat_class),
                Train.available_seats >= search.passengers,
            )
            .order_by(Train.departure_time.asc())
        )

        results = []
        for train, from_dest, to_dest in query.all():
            results.append({
                "id": train.id,
                "train_number": train.train_number,
                "train_name": train.train_name,
                "from_destination_id": train.from_destination_id,
                "to_destination_id": train.to_destination_id,
                "departure_time": train.departure_time,
                "arrival_time": train.arrival_time,
                "duration": train.duration,
                "price": train.price,
                "seat_class": train.seat_class,
                "available_seats": train.available_seats,
                "from_destination": _place(from_dest),
                "to_destination": _place(to_dest),
            })

        logger.info(
            f"Train search {search.from_city!r} -> {search.to_city!r} on "
            f"{search.journey_date} ({search.seat_class}): {len(results)} results"
        )
        return results

    def search_buses(self, search: BusSearch) -> list[dict]:
        # Buses have no class enum; bus_type is free text and not filtered on
        query = (
            self._route_query(Bus, search.from_city, search.to_city, search.journey_date)
            .filter(Bus.available_seats >= search.passengers)
            .order_by(Bus.departure_time.asc())
        )

        results = []
        for bus, from_dest, to_dest in query.all():
            results.append({
                "id": bus.id,
                "operator_name": bus.operator_name,
                "bus_type": bus.bus_type,
                "from_destination_id": bus.from_destination_id,
                "to_destination_id": bus.to_destination_id,
                "departure_time": bus.departure_time,
                "arrival_time": bus.arrival_time,
                "duration": bus.duration,
                "price": bus.price,
                "available_seats": bus.available_seats,
                "total_seats": bus.total_seats,
                "from_destination": _place(from_dest),
                "to_destination": _place(to_dest),
            })

        logger.info(
            f"Bus search {search.from_city!r} -> {search.to_city!r} on "
            f"{search.journey_date} ({search.passengers} pax): {len(results)} results"
        )
        return results

    def search_hotels(self, search: HotelSearch) -> list[dict]:
        """
        Hotels in destinations whose city or name contains the search term.

        Stay dates are not checked against bookings: available_rooms is a
        single counter, not a per-night calendar.
        """
        pattern = contains_pattern(search.destination)
        query = (
            self.db.query(Hotel, Destination)
            .join(Destination, Hotel.destination_id == Destination.id)
            .filter(
                or_(
                    Destination.city.ilike(pattern, escape="\\"),
                    Destination.name.ilike(pattern, escape="\\"),
                ),
                Hotel.available_rooms >= search.rooms,
            )
            .order_by(Hotel.price_per_night.asc())
        )

        results = []
        for hotel, destination in query.all():
            results.append({
                "id": hotel.id,
                "name": hotel.name,
                "description": hotel.description,
                "address": hotel.address,
                "image_url": hotel.image_url,
                "destination_id": hotel.destination_id,
                "rating": hotel.rating,
                "price_per_night": hotel.price_per_night,
                "amenities": hotel.amenities or [],
                "available_rooms": hotel.available_rooms,
                "total_rooms": hotel.total_rooms,
                "destination": _place(destination),
            })

        logger.info(
            f"Hotel search {search.destination!r} {search.check_in_date}..{search.check_out_date} "
            f"({search.rooms} rooms): {len(results)} results"
        )
        return results
