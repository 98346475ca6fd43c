"""Configuration models"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinema_tickets.models.ticket import TicketCategory


class PricingConfig(BaseModel):
    """Ticket prices (in pence) and purchase limits"""
    model_config = ConfigDict(frozen=True)

    adult_price: int = Field(2000, ge=0, description="Price of an adult ticket in pence")
    child_price: int = Field(1000, ge=0, description="Price of a child ticket in pence")
    infant_price: int = Field(0, ge=0, description="Price of an infant ticket in pence")
    max_tickets_per_purchase: int = Field(
        20,
        gt=0,
        description="Maximum number of child and adult tickets in one purchase"
    )

    @field_validator('infant_price')
    @classmethod
    def validate_infant_price(cls, v):
        """Infants sit on an adult's lap and are never charged"""
        if v != 0:
            raise ValueError("infant_price must be 0")
        return v

    @property
    def prices(self) -> dict[TicketCategory, int]:
        """Get unit price per ticket category"""
        return {
            TicketCategory.INFANT: self.infant_price,
            TicketCategory.CHILD: self.child_price,
            TicketCategory.ADULT: self.adult_price,
        }
