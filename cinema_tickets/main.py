"""Main entry point for cinema ticket purchases"""
import logging
import sys
from typing import List, Optional, Tuple

import click

from cinema_tickets.models.config import PricingConfig
from cinema_tickets.models.errors import InvalidPurchaseError, InvalidTicketTypeError
from cinema_tickets.models.outcome import PurchaseOutcome
from cinema_tickets.models.ticket import TicketRequest
from cinema_tickets.processing.purchase import TicketService
from cinema_tickets.services.payment import LoggingPaymentService
from cinema_tickets.services.request_reader import parse_ticket_options, read_ticket_requests
from cinema_tickets.services.seat_reservation import LoggingSeatReservationService
from cinema_tickets.utils.output import save_receipt

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    """Configure logging level based on debug flag"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True  # Override any existing configuration
    )


@click.command()
@click.option('--account-id', required=True, type=int,
              help='Account to charge for the tickets')
@click.option('--ticket', 'tickets', multiple=True,
              help='Ticket request as CATEGORY=COUNT, e.g. ADULT=2 (repeatable)')
@click.option('--requests-file',
              help='JSON file with a list of ticket requests')
@click.option('--max-tickets', type=int, default=None,
              help='Maximum child and adult tickets per purchase (default: 20)')
@click.option('--output',
              help='Write a receipt to this path (JSON or CSV based on extension)')
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug logging for detailed output')
def main(account_id: int, tickets: Tuple[str, ...], requests_file: Optional[str],
         max_tickets: Optional[int], output: Optional[str], debug: bool):
    """
    Cinema Tickets - Validate a ticket purchase, charge the account and reserve seats.

    Infant tickets are free and do not get a seat. Child and infant tickets
    need at least one adult ticket in the same purchase.
    """
    configure_logging(debug=debug)

    try:
        requests = load_ticket_requests(tickets, requests_file)
        config = create_pricing_config(max_tickets)

        outcome = run_purchase(account_id, requests, config)

        if output:
            save_receipt(outcome, output)
            logger.debug(f"Receipt saved to {output}")

        display_purchase_summary(outcome)

    except InvalidPurchaseError as e:
        logger.error(f"Purchase rejected: {e}")
        sys.exit(1)
    except InvalidTicketTypeError as e:
        logger.error(f"Invalid ticket request: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error during processing: {e}", exc_info=True)
        sys.exit(1)


def load_ticket_requests(tickets: Tuple[str, ...], requests_file: Optional[str]) -> List[TicketRequest]:
    """
    Collect ticket requests from --ticket options and an optional JSON file.

    Args:
        tickets: CATEGORY=COUNT strings
        requests_file: Path to JSON requests file (optional)

    Returns:
        Requests from the file followed by requests from the options
    """
    requests = []
    if requests_file:
        requests.extend(read_ticket_requests(requests_file))
    requests.extend(parse_ticket_options(tickets))
    return requests


def create_pricing_config(max_tickets: Optional[int]) -> PricingConfig:
    """Create pricing configuration, overriding the ticket limit if given"""
    if max_tickets is None:
        return PricingConfig()
    return PricingConfig(max_tickets_per_purchase=max_tickets)


def run_purchase(account_id: int, requests: List[TicketRequest], config: PricingConfig) -> PurchaseOutcome:
    """
    Run a single purchase against the logging payment and reservation services.

    Args:
        account_id: Account to charge
        requests: Ticket requests
        config: Pricing configuration

    Returns:
        Outcome of the purchase
    """
    service = TicketService(
        payment_service=LoggingPaymentService(),
        reservation_service=LoggingSeatReservationService(),
        config=config
    )
    return service.purchase_tickets(account_id, *requests)


def display_purchase_summary(outcome: PurchaseOutcome) -> None:
    """
    Display summary of the purchase to console.

    Args:
        outcome: Completed purchase
    """
    totals = outcome.totals
    print(f"\n{'='*40}")
    print(f"Account:        {outcome.account_id}")
    print(f"Tickets:        {totals.adult} adult, {totals.child} child, {totals.infant} infant")
    print(f"Total charge:   £{outcome.total_charge / 100:.2f}")
    print(f"Seats reserved: {outcome.seats_reserved}")
    print(f"{'='*40}\n")


if __name__ == '__main__':
    main()
