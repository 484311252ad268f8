import logging
from threading import Lock
from typing import Dict, List
from uuid import UUID, uuid4

from .errors import NotFoundError
from .models import Price


logger = logging.getLogger(__name__)


class PriceStore:
    """In-memory map of price records guarded by a single lock.

    Every operation holds the lock only for its own map access. Nothing is
    persisted; the store starts empty and lives as long as its owner.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._prices: Dict[UUID, Price] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._prices)

    def create(self, price: int) -> Price:
        record = Price(id=uuid4(), price=price)
        with self._lock:
            self._prices[record.id] = record
        logger.info("Created price %s: %d", record.id, record.price)
        return record

    def get(self, price_id: UUID) -> Price:
        with self._lock:
            record = self._prices.get(price_id)
        if record is None:
            logger.info("Price not found: %s", price_id)
            raise NotFoundError()
        logger.debug("Found price %s", price_id)
        return record

    def delete(self, price_id: UUID) -> Price:
        with self._lock:
            record = self._prices.pop(price_id, None)
        if record is None:
            logger.info("Price not found: %s", price_id)
            raise NotFoundError()
        logger.info("Deleted price %s", price_id)
        return record

    def list_all(self) -> List[Price]:
        """Snapshot of all records, in no particular order."""
        with self._lock:
            return list(self._prices.values())
