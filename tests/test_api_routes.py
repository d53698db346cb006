import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch, MagicMock

from app.services.exceptions import UnknownInventoryCategoryError


def make_order(order_id=123456, name="Kiosk", lines=()):
    mock_order = MagicMock()
    mock_order.id = order_id
    mock_order.name = name
    mock_order.total = Decimal("12.50")
    mock_order.time_stamp = datetime(2024, 10, 27, 15, 30, tzinfo=timezone.utc)
    mock_order.lines = [
        MagicMock(product_name=product, quantity=qty, price=Decimal(price))
        for product, qty, price in lines
    ]
    return mock_order


class TestPaymentRoute:
    def test_pay_success(self, client):
        """Payment returns 201 with the new order id"""
        with patch('app.api.v1.orders.process_payment') as mock_pay:
            mock_pay.return_value = 123456

            payload = {
                "items": [{"name": "L_orange_chicken", "quantity": 2, "price": 5.2}],
                "employeeName": "alice",
            }
            response = client.post("/api/v1/orders/pay", json=payload)

            assert response.status_code == 201
            body = response.json()
            assert body["success"] is True
            assert body["data"]["order_id"] == 123456
            mock_pay.assert_awaited_once()
            assert mock_pay.call_args.kwargs["employee_name"] == "alice"

    def test_pay_passes_non_numeric_price_through(self, client):
        """The service decides the fallback, the route must not reject the line"""
        with patch('app.api.v1.orders.process_payment') as mock_pay:
            mock_pay.return_value = 654321

            payload = {
                "items": [{"name": "X", "quantity": 2, "price": "not-a-number"}],
                "employeeName": "alice",
            }
            response = client.post("/api/v1/orders/pay", json=payload)

            assert response.status_code == 201
            assert mock_pay.call_args.kwargs["items"] == [{"name": "X", "quantity": 2, "price": "not-a-number"}]

    def test_pay_accepts_empty_cart(self, client):
        with patch('app.api.v1.orders.process_payment') as mock_pay:
            mock_pay.return_value = 111111

            response = client.post("/api/v1/orders/pay", json={"items": [], "employeeName": "Kiosk"})

            assert response.status_code == 201
            assert mock_pay.call_args.kwargs["items"] == []

    def test_pay_domain_failure(self, client):
        """An aborted transaction is reported as a generic payment failure"""
        with patch('app.api.v1.orders.process_payment') as mock_pay:
            mock_pay.side_effect = UnknownInventoryCategoryError("five_spice", "seasoning")

            payload = {"items": [{"name": "L_orange_chicken", "quantity": 1, "price": 5.2}], "employeeName": "alice"}
            response = client.post("/api/v1/orders/pay", json=payload)

            assert response.status_code == 500
            body = response.json()
            assert body["success"] is False
            assert body["error"]["code"] == "payment_failed"
            assert body["error"]["message"] == "Payment processing failed"

    def test_pay_store_failure(self, client):
        with patch('app.api.v1.orders.process_payment') as mock_pay:
            mock_pay.side_effect = ConnectionError("database went away")

            payload = {"items": [{"name": "L_orange_chicken", "quantity": 1, "price": 5.2}], "employeeName": "alice"}
            response = client.post("/api/v1/orders/pay", json=payload)

            assert response.status_code == 500
            assert response.json()["error"]["message"] == "Payment processing failed"

    @pytest.mark.parametrize("line", [
        {"name": "L_orange_chicken", "quantity": 0, "price": 5.2},
        {"name": "L_orange_chicken", "quantity": "two", "price": 5.2},
        {"quantity": 1, "price": 5.2},
    ])
    def test_pay_rejects_invalid_lines(self, client, line):
        response = client.post("/api/v1/orders/pay", json={"items": [line], "employeeName": "alice"})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_pay_requires_employee_name(self, client):
        response = client.post("/api/v1/orders/pay", json={"items": []})
        assert response.status_code == 422


class TestOrderRoutes:
    def test_get_order_success(self, client):
        """Test order retrieval"""
        with patch('app.api.v1.orders.get_order_by_id') as mock_get_order:
            mock_get_order.return_value = make_order(lines=[("M_orange_chicken", 2, "4.40")])

            response = client.get("/api/v1/orders/123456")

            assert response.status_code == 200
            data = response.json()["data"]
            assert data["order_id"] == 123456
            assert data["items"] == [{"product_name": "M_orange_chicken", "quantity": 2, "price": "4.40"}]

    def test_get_order_not_found(self, client):
        with patch('app.api.v1.orders.get_order_by_id') as mock_get_order:
            mock_get_order.return_value = None

            response = client.get("/api/v1/orders/999999")

            assert response.status_code == 404
            assert response.json()["error"]["message"] == "Order not found"

    def test_current_orders_use_readable_names(self, client):
        with patch('app.api.v1.orders.list_current_kiosk_orders') as mock_current:
            mock_current.return_value = [
                make_order(lines=[("M_orange_chicken", 1, "4.40"), ("L_chow_mein", 1, "4.40")]),
            ]

            response = client.get("/api/v1/orders/current")

            assert response.status_code == 200
            items = response.json()["data"][0]["items"]
            assert [i["product_name"] for i in items] == ["Medium orange chicken", "Large chow mein"]
