"""Unit tests for data models - covering validation requirements"""
import pytest
from pydantic import ValidationError
from cinema_tickets.models.config import PricingConfig
from cinema_tickets.models.errors import (
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketCountError,
    InvalidTicketTypeError,
    UnaccompaniedMinorsError
)
from cinema_tickets.models.outcome import PurchaseOutcome
from cinema_tickets.models.ticket import TicketCategory, TicketRequest
from cinema_tickets.models.totals import TicketTotals


class TestTicketModels:
    """Test ticket request model validation"""

    def test_ticket_request_from_aliases(self):
        """Test that TicketRequest accepts the JSON aliases"""
        request = TicketRequest.model_validate({"type": "ADULT", "noOfTickets": 2})
        assert request.category == TicketCategory.ADULT
        assert request.count == 2

    def test_ticket_request_from_field_names(self):
        """Test that TicketRequest accepts field names"""
        request = TicketRequest(category=TicketCategory.CHILD, count=1)
        assert request.category == TicketCategory.CHILD
        assert request.count == 1

    def test_category_name_is_case_insensitive(self):
        """Test that lower case category names are accepted"""
        request = TicketRequest.of("infant", 1)
        assert request.category == TicketCategory.INFANT

    def test_negative_count_is_representable(self):
        """Test that negative counts are left for the purchase rules to reject"""
        request = TicketRequest.of(TicketCategory.ADULT, -1)
        assert request.count == -1

    def test_unknown_category_fails_fast(self):
        """Test that an unknown category raises InvalidTicketTypeError"""
        with pytest.raises(InvalidTicketTypeError):
            TicketRequest.of("SENIOR", 1)

    def test_unknown_category_is_not_a_purchase_error(self):
        """Test that an unknown category is a data error, not a business rule"""
        with pytest.raises(InvalidTicketTypeError) as exc_info:
            TicketCategory.parse(42)
        assert not isinstance(exc_info.value, InvalidPurchaseError)
        assert exc_info.value.code == ErrorCode.INVALID_TICKET_TYPE

    @pytest.mark.parametrize("count", [True, False, "3", 2.5])
    def test_non_integer_count_rejected(self, count):
        """Test that bools, strings and floats are not coerced into ticket counts"""
        with pytest.raises(ValidationError):
            TicketRequest.model_validate({"type": "ADULT", "noOfTickets": count})

    def test_missing_count_raises_validation_error(self):
        """Test that a request without a count is invalid"""
        with pytest.raises(ValidationError):
            TicketRequest.model_validate({"type": "ADULT"})

    def test_ticket_request_is_immutable(self):
        """Test that requests cannot be changed after creation"""
        request = TicketRequest.of(TicketCategory.ADULT, 1)
        with pytest.raises(ValidationError):
            request.count = 5


class TestTicketTotals:
    """Test aggregated totals model"""

    def test_defaults_to_zero(self):
        """Test that every category defaults to zero"""
        totals = TicketTotals()
        assert (totals.infant, totals.child, totals.adult) == (0, 0, 0)

    def test_rejects_negative_counts(self):
        """Test that totals can never be negative"""
        with pytest.raises(ValidationError):
            TicketTotals(adult=-1)

    def test_derived_counts(self):
        """Test payable, reservable and accompaniment counts"""
        totals = TicketTotals(infant=3, child=2, adult=1)
        assert totals.payable == 3
        assert totals.reservable_seats == 3
        assert totals.requiring_accompaniment == 5

    def test_count_for_category(self):
        """Test lookup of a count by category"""
        totals = TicketTotals(infant=3, child=2, adult=1)
        assert totals.count_for(TicketCategory.INFANT) == 3
        assert totals.count_for(TicketCategory.CHILD) == 2
        assert totals.count_for(TicketCategory.ADULT) == 1


class TestPricingConfig:
    """Test configuration model validation"""

    def test_default_prices_and_limit(self):
        """Test that defaults match the published prices"""
        config = PricingConfig()
        assert config.adult_price == 2000
        assert config.child_price == 1000
        assert config.infant_price == 0
        assert config.max_tickets_per_purchase == 20

    def test_prices_by_category(self):
        """Test that prices are available per category"""
        prices = PricingConfig().prices
        assert prices[TicketCategory.ADULT] == 2000
        assert prices[TicketCategory.CHILD] == 1000
        assert prices[TicketCategory.INFANT] == 0

    def test_infant_price_must_be_zero(self):
        """Test that infants cannot be charged"""
        with pytest.raises(ValidationError):
            PricingConfig(infant_price=500)

    def test_limit_must_be_positive(self):
        """Test that the ticket limit must be positive"""
        with pytest.raises(ValidationError):
            PricingConfig(max_tickets_per_purchase=0)

    def test_negative_price_rejected(self):
        """Test that prices cannot be negative"""
        with pytest.raises(ValidationError):
            PricingConfig(adult_price=-1)


class TestErrors:
    """Test error codes and messages"""

    def test_error_codes(self):
        """Test that each error carries its code"""
        assert InvalidAccountError(-1).code == ErrorCode.INVALID_ACCOUNT
        assert InvalidTicketCountError("too many").code == ErrorCode.INVALID_TICKET_COUNT
        assert UnaccompaniedMinorsError().code == ErrorCode.UNACCOMPANIED_MINORS

    def test_error_str_includes_code(self):
        """Test that the string form is CODE: message"""
        assert str(InvalidTicketCountError("too many")) == "INVALID_TICKET_COUNT: too many"

    def test_business_errors_share_base(self):
        """Test that business rule failures can be caught together"""
        for error in (InvalidAccountError(-1), InvalidTicketCountError("x"), UnaccompaniedMinorsError()):
            assert isinstance(error, InvalidPurchaseError)


class TestPurchaseOutcome:
    """Test purchase outcome model"""

    def test_outcome_dump(self):
        """Test that outcome serializes with nested totals"""
        outcome = PurchaseOutcome(
            account_id=1,
            total_charge=3000,
            seats_reserved=2,
            totals=TicketTotals(child=1, adult=1)
        )
        data = outcome.model_dump()
        assert data["total_charge"] == 3000
        assert data["totals"] == {"infant": 0, "child": 1, "adult": 1}
