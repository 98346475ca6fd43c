"""Seat reservation collaborator"""
from abc import ABC, abstractmethod
from typing import List, Tuple

import logging

logger = logging.getLogger(__name__)


class SeatReservationService(ABC):
    """Interface for the external seat booking provider"""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve a number of seats for an account."""
        ...


class LoggingSeatReservationService(SeatReservationService):
    """Seat reservation service that logs and records reservations"""

    def __init__(self):
        self.calls: List[Tuple[int, int]] = []

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(f"Reserving {total_seats_to_allocate} seat(s) for account {account_id}")
        self.calls.append((account_id, total_seats_to_allocate))
