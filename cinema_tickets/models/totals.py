"""Aggregated ticket counts for a single purchase"""
from pydantic import BaseModel, ConfigDict, Field

from cinema_tickets.models.ticket import TicketCategory


class TicketTotals(BaseModel):
    """Ticket counts per category, one field for each category"""
    model_config = ConfigDict(frozen=True)

    infant: int = Field(0, ge=0, description="Number of infant tickets")
    child: int = Field(0, ge=0, description="Number of child tickets")
    adult: int = Field(0, ge=0, description="Number of adult tickets")

    def count_for(self, category: TicketCategory) -> int:
        """Get the ticket count for a category"""
        return getattr(self, category.value.lower())

    @property
    def payable(self) -> int:
        """Tickets that are charged for and count toward the purchase limit"""
        return self.child + self.adult

    @property
    def reservable_seats(self) -> int:
        """Tickets that occupy a seat (infants sit on an adult's lap)"""
        return self.child + self.adult

    @property
    def requiring_accompaniment(self) -> int:
        """Tickets that may only be bought alongside an adult ticket"""
        return self.child + self.infant
