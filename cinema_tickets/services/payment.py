"""Payment collaborator used to charge an account"""
from abc import ABC, abstractmethod
from typing import List, Tuple

import logging

logger = logging.getLogger(__name__)


class TicketPaymentService(ABC):
    """Interface for the external payment provider"""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge an account the given amount in pence."""
        ...


class LoggingPaymentService(TicketPaymentService):
    """Payment service that logs and records payments instead of charging"""

    def __init__(self):
        self.calls: List[Tuple[int, int]] = []

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info(f"Charging account {account_id}: {total_amount_to_pay} pence")
        self.calls.append((account_id, total_amount_to_pay))
