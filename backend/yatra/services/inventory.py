"""
Seat and room counters.

Reservations are one conditional UPDATE guarded by `available >= requested`,
run inside the caller's transaction, so two concurrent bookings can never
take the counter below zero. Nothing here commits.
"""

import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from yatra.exceptions import InventoryUnavailableError
from yatra.models import Bus, Flight, Hotel, Train, TravelType

logger = logging.getLogger(__name__)

INVENTORY_MODELS = {
    TravelType.FLIGHT: Flight,
    TravelType.HOTEL: Hotel,
    TravelType.TRAIN: Train,
    TravelType.BUS: Bus,
}


def get_item(db: Session, travel_type: TravelType, item_id: str):
    model = INVENTORY_MODELS[travel_type]
    return db.query(model).filter(model.id == item_id).first()


def available_units(item) -> Optional[int]:
    return getattr(item, item.availability_attr)


def reserve(db: Session, travel_type: TravelType, item_id: str, quantity: int) -> None:
    model = INVENTORY_MODELS[travel_type]
    counter = getattr(model, model.availability_attr)

    result = db.execute(
        update(model)
        .where(model.id == item_id, counter >= quantity)
        .values({counter: counter - quantity})
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount != 1:
        logger.warning(f"Inventory conflict: {travel_type.value} {item_id} cannot supply {quantity}")
        raise InventoryUnavailableError(travel_type.value, item_id, quantity)

    logger.info(f"Reserved {quantity} on {travel_type.value} {item_id}")


def release(db: Session, travel_type: TravelType, item_id: str, quantity: int) -> None:
    model = INVENTORY_MODELS[travel_type]
    counter = getattr(model, model.availability_attr)

    db.execute(
        update(model)
        .where(model.id == item_id)
        .values({counter: counter + quantity})
        .execution_options(synchronize_session="fetch")
    )
    logger.info(f"Released {quantity} on {travel_type.value} {item_id}")
