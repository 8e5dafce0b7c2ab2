# responses.py

from typing import Optional
from fastapi.responses import JSONResponse

from app.schemas import OrderRecord
from app.validation import ValidationOutcome

ERROR_MESSAGES = {
    ValidationOutcome.MISSING_CUSTOMER: "No Customer ID",
    ValidationOutcome.MISSING_PRODUCT_ID: "Bad Request: No Product ID",
    ValidationOutcome.AMOUNT_TOO_SMALL: "Bad Request: amount can not be less than 0.1",
    ValidationOutcome.MALFORMED_REQUEST: "Bad Request: Malformed order",
}


def build_order_response(outcome: ValidationOutcome, record: Optional[OrderRecord] = None, legacy_customer_status: bool = False):
    """
    Map a validation outcome to (status_code, body).

    A missing customer id always carries status 400 in the body. The wire status is 400
    unless legacy_customer_status is set, which reproduces the original 200.
    """
    if outcome is ValidationOutcome.VALID:
        if record is None:
            raise ValueError("A valid outcome needs an order record")
        data = record.model_dump(mode="json", by_alias=True)
        return 200, {"status": 200, "data": data, "message": "successful"}

    body = {"status": 400, "message": ERROR_MESSAGES[outcome]}
    if outcome is ValidationOutcome.MISSING_CUSTOMER and legacy_customer_status:
        return 200, body
    return 400, body


def order_json_response(outcome: ValidationOutcome, record: Optional[OrderRecord] = None, legacy_customer_status: bool = False) -> JSONResponse:
    status_code, body = build_order_response(outcome, record, legacy_customer_status)
    return JSONResponse(content=body, status_code=status_code)
