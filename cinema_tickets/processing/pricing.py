"""Pricing and seat calculations"""
from cinema_tickets.models.config import PricingConfig
from cinema_tickets.models.errors import InvalidTicketTypeError
from cinema_tickets.models.ticket import TicketCategory
from cinema_tickets.models.totals import TicketTotals


def price_for_category(category: TicketCategory, config: PricingConfig) -> int:
    """
    Get the unit price in pence for a ticket category

    Args:
        category: Ticket category
        config: Pricing configuration

    Returns:
        Price in pence

    Raises:
        InvalidTicketTypeError: If the category is not recognised
    """
    if not isinstance(category, TicketCategory):
        raise InvalidTicketTypeError(category)
    return config.prices[category]


def calculate_total_charge(totals: TicketTotals, config: PricingConfig) -> int:
    """
    Calculate the total charge in pence for a purchase

    Every category contributes, including those with no tickets.

    Args:
        totals: Aggregated ticket counts
        config: Pricing configuration

    Returns:
        Total charge in pence
    """
    return sum(
        price_for_category(category, config) * totals.count_for(category)
        for category in TicketCategory
    )


def count_reservable_seats(totals: TicketTotals) -> int:
    """Number of seats to reserve - infants are not allocated a seat"""
    return totals.reservable_seats
