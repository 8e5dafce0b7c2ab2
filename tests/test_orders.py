import pytest

from app.orders import build_order_record
from app.responses import build_order_response
from app.schemas import Item
from app.validation import ValidationOutcome


def test_record_echoes_items_and_shares_timestamp():
    items = [Item(product_id="p1", amount=0.5), Item(product_id="p2", amount=3)]
    record = build_order_record(items)

    assert record.items == items
    assert record.created_at == record.updated_at
    assert 0 <= record.id < 1


def test_record_uses_random_id(monkeypatch):
    monkeypatch.setattr("app.orders.random.random", lambda: 0.25)
    assert build_order_record([]).id == 0.25


def test_valid_response_body():
    record = build_order_record([Item(product_id="p1", amount=0.5)])
    status_code, body = build_order_response(ValidationOutcome.VALID, record)

    assert status_code == 200
    assert body["status"] == 200
    assert body["message"] == "successful"
    assert body["data"]["items"] == [{"productId": "p1", "amount": 0.5}]
    assert body["data"]["createdAt"] == body["data"]["updatedAt"]
    assert body["data"]["id"] == record.id


def test_valid_response_needs_record():
    with pytest.raises(ValueError):
        build_order_response(ValidationOutcome.VALID)


@pytest.mark.parametrize(
    "outcome, message",
    [
        (ValidationOutcome.MISSING_PRODUCT_ID, "Bad Request: No Product ID"),
        (ValidationOutcome.AMOUNT_TOO_SMALL, "Bad Request: amount can not be less than 0.1"),
        (ValidationOutcome.MALFORMED_REQUEST, "Bad Request: Malformed order"),
        (ValidationOutcome.MISSING_CUSTOMER, "No Customer ID"),
    ],
)
def test_error_responses(outcome, message):
    assert build_order_response(outcome) == (400, {"status": 400, "message": message})


def test_missing_customer_legacy_status():
    status_code, body = build_order_response(ValidationOutcome.MISSING_CUSTOMER, legacy_customer_status=True)
    assert status_code == 200
    assert body == {"status": 400, "message": "No Customer ID"}


def test_legacy_status_only_affects_missing_customer():
    status_code, _ = build_order_response(ValidationOutcome.AMOUNT_TOO_SMALL, legacy_customer_status=True)
    assert status_code == 400
