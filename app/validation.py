# validation.py

from enum import Enum

from app.schemas import OrderRequest

MIN_AMOUNT = 0.1


class ValidationOutcome(str, Enum):
    VALID = "valid"
    MISSING_CUSTOMER = "missing_customer"
    MISSING_PRODUCT_ID = "missing_product_id"
    AMOUNT_TOO_SMALL = "amount_too_small"
    MALFORMED_REQUEST = "malformed_request"


def validate_order(order: OrderRequest) -> ValidationOutcome:
    """
    Run the intake checks on a decoded order.

    CHECK, in order:
      - Customer: a missing customer id is recorded but does not stop evaluation.
      - Product id: any item without a product id fails the order; the amount check is skipped.
      - Amount: any item with an amount below 0.1 fails the order.

    An item failure supersedes a missing customer id.
    """
    outcome = ValidationOutcome.VALID

    if not order.customer_id:
        outcome = ValidationOutcome.MISSING_CUSTOMER

    if any(not item.product_id for item in order.items):
        return ValidationOutcome.MISSING_PRODUCT_ID

    if any(item.amount < MIN_AMOUNT for item in order.items):
        return ValidationOutcome.AMOUNT_TOO_SMALL

    return outcome
