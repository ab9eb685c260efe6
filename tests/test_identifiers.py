"""Tests for public identifier generation."""

from app.utils.identifiers import generate_api_credentials, generate_order_id, generate_payment_id


def test_order_id_shape():
    order_id = generate_order_id()

    assert order_id.startswith("order_")
    assert len(order_id) == len("order_") + 16
    assert order_id[len("order_"):].isalnum()


def test_payment_ids_are_unique():
    ids = {generate_payment_id() for _ in range(200)}

    assert len(ids) == 200
    assert all(i.startswith("pay_") for i in ids)


def test_api_credentials():
    api_key, api_secret = generate_api_credentials()

    assert api_key.startswith("key_")
    assert api_secret.startswith("secret_")
    assert len(api_secret) > len(api_key)
