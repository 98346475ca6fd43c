"""Aggregation of ticket requests into per-category totals"""
from typing import Iterable

from cinema_tickets.models.errors import InvalidTicketCountError
from cinema_tickets.models.ticket import TicketCategory, TicketRequest
from cinema_tickets.models.totals import TicketTotals

import logging

logger = logging.getLogger(__name__)


def aggregate_ticket_requests(requests: Iterable[TicketRequest]) -> TicketTotals:
    """
    Sum ticket counts per category across all requests

    Requests may repeat a category; their counts are added together, so three
    requests for one adult ticket give the same totals as one request for three.
    Categories that are not requested have a count of zero.

    Args:
        requests: Ticket requests for a single purchase

    Returns:
        TicketTotals with a count for every category

    Raises:
        InvalidTicketCountError: If any request has a negative count
        InvalidTicketTypeError: If a request has an unrecognised category
    """
    counts = {category: 0 for category in TicketCategory}

    for request in requests:
        category = TicketCategory.parse(request.category)
        if request.count < 0:
            raise InvalidTicketCountError(
                f"Ticket count cannot be negative ({category.value}: {request.count})"
            )
        counts[category] += request.count

    totals = TicketTotals(
        infant=counts[TicketCategory.INFANT],
        child=counts[TicketCategory.CHILD],
        adult=counts[TicketCategory.ADULT]
    )
    logger.debug(f"Aggregated totals: {totals.adult} adult, {totals.child} child, {totals.infant} infant")
    return totals
