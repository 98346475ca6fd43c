"""Output utilities for writing purchase receipts"""
import csv
import json
from pathlib import Path

from cinema_tickets.models.outcome import PurchaseOutcome

import logging

logger = logging.getLogger(__name__)


def write_receipt_json(outcome: PurchaseOutcome, output_path: str) -> None:
    """
    Write purchase receipt to JSON file

    Args:
        outcome: Completed purchase
        output_path: Output file path
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(outcome.model_dump(), f, indent=2)

    logger.debug(f"Wrote JSON receipt to {output_path}")


def write_receipt_csv(outcome: PurchaseOutcome, output_path: str) -> None:
    """
    Write purchase receipt to CSV file

    Args:
        outcome: Completed purchase
        output_path: Output file path
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow([
            'Account Id',
            'Adult Tickets',
            'Child Tickets',
            'Infant Tickets',
            'Total Charge',
            'Seats Reserved'
        ])
        writer.writerow([
            outcome.account_id,
            outcome.totals.adult,
            outcome.totals.child,
            outcome.totals.infant,
            outcome.total_charge,
            outcome.seats_reserved
        ])

    logger.debug(f"Wrote CSV receipt to {output_path}")


def save_receipt(outcome: PurchaseOutcome, output_path: str) -> None:
    """Save receipt in the format given by the file extension (.json, otherwise CSV)"""
    if output_path.endswith('.json'):
        write_receipt_json(outcome, output_path)
    else:
        write_receipt_csv(outcome, output_path)
