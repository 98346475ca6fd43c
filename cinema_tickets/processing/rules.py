"""Business rules a purchase must satisfy before it is charged"""
from cinema_tickets.models.errors import (
    InvalidAccountError,
    InvalidTicketCountError,
    UnaccompaniedMinorsError
)
from cinema_tickets.models.totals import TicketTotals

import logging

logger = logging.getLogger(__name__)


def validate_account(account_id: int) -> None:
    """
    Check that the account id refers to a valid account

    Any non-negative integer is treated as a valid account id.

    Args:
        account_id: Account to be charged

    Raises:
        InvalidAccountError: If the id is negative or not an integer
    """
    # bool is an int subclass but never a meaningful account id
    if not isinstance(account_id, int) or isinstance(account_id, bool):
        raise InvalidAccountError(account_id)
    if account_id < 0:
        raise InvalidAccountError(account_id)


def check_ticket_limit(totals: TicketTotals, max_tickets: int) -> None:
    """
    Check that the purchase does not exceed the ticket limit

    The limit applies to the combined total of all requests. Infant tickets
    are not counted.

    Args:
        totals: Aggregated ticket counts
        max_tickets: Maximum number of child and adult tickets

    Raises:
        InvalidTicketCountError: If child and adult tickets exceed the limit
    """
    if totals.payable > max_tickets:
        raise InvalidTicketCountError(
            f"A maximum of {max_tickets} tickets can be purchased at a time, {totals.payable} requested"
        )


def check_accompaniment(totals: TicketTotals) -> None:
    """
    Check that child and infant tickets are bought with an adult ticket

    Args:
        totals: Aggregated ticket counts

    Raises:
        UnaccompaniedMinorsError: If there are child or infant tickets but no adult
    """
    if totals.requiring_accompaniment > 0 and totals.adult == 0:
        raise UnaccompaniedMinorsError()


def apply_purchase_rules(totals: TicketTotals, max_tickets: int) -> None:
    """Apply the ticket limit and then the accompaniment rule"""
    check_ticket_limit(totals, max_tickets)
    check_accompaniment(totals)
    logger.debug("Purchase rules passed")
