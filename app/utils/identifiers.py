"""Public identifier generation utilities."""

import secrets
import string

ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 16


def _random_part(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def generate_order_id() -> str:
    """Generate an order id.

    Returns:
        str: Order id like 'order_NXhj3kLp9QzR2tYw'
    """
    return f"order_{_random_part()}"


def generate_payment_id() -> str:
    """Generate a payment id.

    Returns:
        str: Payment id like 'pay_H8sK2mQe7LxP0vZa'
    """
    return f"pay_{_random_part()}"


def generate_api_credentials() -> tuple[str, str]:
    """Generate an API key/secret pair for a merchant.

    Returns:
        tuple: ('key_...', 'secret_...')
    """
    return f"key_{_random_part()}", f"secret_{_random_part(32)}"
