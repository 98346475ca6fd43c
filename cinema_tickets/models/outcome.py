"""Purchase outcome models"""
from pydantic import BaseModel, ConfigDict, Field

from cinema_tickets.models.totals import TicketTotals


class PurchaseOutcome(BaseModel):
    """Result of a successful purchase, as passed to payment and reservation"""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "account_id": 1,
                "total_charge": 5000,
                "seats_reserved": 3,
                "totals": {"infant": 1, "child": 1, "adult": 2}
            }
        }
    )

    account_id: int
    total_charge: int = Field(..., ge=0, description="Total charge in pence")
    seats_reserved: int = Field(..., ge=0, description="Number of seats reserved")
    totals: TicketTotals
