"""Data models for ticket requests"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinema_tickets.models.errors import InvalidTicketTypeError


class TicketCategory(str, Enum):
    """Ticket category - determines price and whether a seat is reserved"""
    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"

    @classmethod
    def parse(cls, value) -> 'TicketCategory':
        """
        Parse a category from an enum member or a case-insensitive name

        Args:
            value: TicketCategory or string such as 'adult'

        Returns:
            Matching TicketCategory

        Raises:
            InvalidTicketTypeError: If the value is not a known category
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidTicketTypeError(value)


class TicketRequest(BaseModel):
    """Request for a number of tickets of one category"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: TicketCategory = Field(..., alias="type", description="INFANT, CHILD or ADULT")
    # Strict: bools and numeric strings are not counts. Negative
    # counts are rejected during aggregation, not here
    count: int = Field(..., alias="noOfTickets", strict=True, description="Number of tickets requested")

    @field_validator('category', mode='before')
    @classmethod
    def parse_category(cls, v):
        """Accept category names in any case"""
        return TicketCategory.parse(v)

    @classmethod
    def of(cls, category, count: int) -> 'TicketRequest':
        """Shorthand constructor used by callers that don't deal in aliases"""
        return cls(category=category, count=count)
