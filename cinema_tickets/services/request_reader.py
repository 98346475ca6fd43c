"""Reader for ticket requests given on the command line or in a JSON file"""
import json
import re
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from cinema_tickets.models.ticket import TicketCategory, TicketRequest

import logging

logger = logging.getLogger(__name__)

TICKET_OPTION_PATTERN = re.compile(r'^\s*([A-Za-z]+)\s*[=:]\s*(-?\d+)\s*$')


def parse_ticket_option(value: str) -> TicketRequest:
    """
    Parse a ticket request given as 'CATEGORY=COUNT' (or 'CATEGORY:COUNT')

    Args:
        value: Option string, e.g. 'ADULT=2' or 'child:1'

    Returns:
        TicketRequest

    Raises:
        ValueError: If the string is not in CATEGORY=COUNT form
        InvalidTicketTypeError: If the category is not recognised
    """
    match = TICKET_OPTION_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid ticket request '{value}', expected CATEGORY=COUNT")

    category = TicketCategory.parse(match.group(1))
    return TicketRequest(category=category, count=int(match.group(2)))


def parse_ticket_options(values: Iterable[str]) -> List[TicketRequest]:
    """Parse several 'CATEGORY=COUNT' strings"""
    return [parse_ticket_option(value) for value in values]


def read_ticket_requests(input_path: str) -> List[TicketRequest]:
    """
    Read ticket requests from a JSON file

    The file holds a list of objects, either
    {"type": "ADULT", "noOfTickets": 2} or {"category": "ADULT", "count": 2}.

    Args:
        input_path: Path to JSON file

    Returns:
        List of TicketRequest in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON list of valid requests
        InvalidTicketTypeError: If an entry has an unrecognised category
    """
    path = Path(input_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Requests file not found: {input_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {input_path}: {e}")
        raise ValueError(f"Invalid JSON in {input_path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of ticket requests in {input_path}")

    requests = []
    for index, entry in enumerate(data, 1):
        try:
            requests.append(TicketRequest.model_validate(entry))
        except ValidationError as e:
            logger.error(f"Invalid ticket request #{index} in {input_path}: {e}")
            raise ValueError(f"Invalid ticket request #{index} in {input_path}") from e

    logger.debug(f"Read {len(requests)} ticket request(s) from {input_path}")
    return requests
