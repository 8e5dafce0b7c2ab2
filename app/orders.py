# orders.py

import random
from datetime import datetime, timezone
from typing import List

from app.schemas import Item, OrderRecord


def build_order_record(items: List[Item]) -> OrderRecord:
    """ Synthesize an order record for a validated request. Ids are random floats and may collide. """
    now = datetime.now(timezone.utc)
    return OrderRecord(
        id=random.random(),
        created_at=now,
        updated_at=now,
        items=list(items),
    )
