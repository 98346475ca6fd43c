"""Ticket purchase processing"""
from typing import Optional

from cinema_tickets.models.config import PricingConfig
from cinema_tickets.models.errors import InvalidPurchaseError
from cinema_tickets.models.outcome import PurchaseOutcome
from cinema_tickets.models.ticket import TicketRequest
from cinema_tickets.processing.aggregation import aggregate_ticket_requests
from cinema_tickets.processing.pricing import calculate_total_charge, count_reservable_seats
from cinema_tickets.processing.rules import apply_purchase_rules, validate_account
from cinema_tickets.services.payment import TicketPaymentService
from cinema_tickets.services.seat_reservation import SeatReservationService

import logging

logger = logging.getLogger(__name__)


class TicketService:
    """Validates ticket purchases, then charges the account and reserves seats"""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        config: Optional[PricingConfig] = None
    ):
        """
        Initialize ticket service

        Args:
            payment_service: Payment provider used to charge the account
            reservation_service: Seat booking provider
            config: Prices and purchase limit (defaults apply if omitted)
        """
        self.payment_service = payment_service
        self.reservation_service = reservation_service
        self.config = config or PricingConfig()

    def purchase_tickets(self, account_id: int, *ticket_requests: TicketRequest) -> PurchaseOutcome:
        """
        Purchase tickets for an account.

        Steps, in order:
        1. Validate the account id
        2. Aggregate requests into per-category totals
        3. Apply the ticket limit and accompaniment rules
        4. Calculate the charge and number of seats
        5. Make the payment, then reserve the seats

        Purchases with no requests or only zero counts are not rejected; they
        result in a payment of 0 and a reservation of 0 seats.

        Args:
            account_id: Account to charge
            *ticket_requests: Requested tickets

        Returns:
            PurchaseOutcome describing what was charged and reserved

        Raises:
            InvalidAccountError: If the account id is invalid
            InvalidTicketCountError: If a count is negative or the limit is exceeded
            UnaccompaniedMinorsError: If child or infant tickets have no adult
        """
        try:
            validate_account(account_id)
            totals = aggregate_ticket_requests(ticket_requests)
            apply_purchase_rules(totals, self.config.max_tickets_per_purchase)
        except InvalidPurchaseError as e:
            logger.warning(f"Purchase rejected for account {account_id!r}: {e}")
            raise

        total_charge = calculate_total_charge(totals, self.config)
        seats = count_reservable_seats(totals)

        self.payment_service.make_payment(account_id, total_charge)
        self.reservation_service.reserve_seat(account_id, seats)

        outcome = PurchaseOutcome(
            account_id=account_id,
            total_charge=total_charge,
            seats_reserved=seats,
            totals=totals
        )
        logger.info(f"Purchase complete for account {account_id}: {total_charge} pence, {seats} seat(s)")
        return outcome
