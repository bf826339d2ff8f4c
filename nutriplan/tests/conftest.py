import httpx
import pytest


@pytest.fixture
def mock_http():
    """Factory for an AsyncClient whose requests are answered by handler(request)."""
    def _factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _factory


@pytest.fixture
def menu_payload():
    return {
        "meals": [
            {"id": 101, "slot": 1, "title": "Mock Breakfast"},
            {"id": 202, "slot": 2, "title": "Mock Lunch"},
            {"id": 303, "slot": 3, "title": "Mock Dinner"},
        ],
        "nutrients": {"calories": 2000, "protein": 100, "fat": 70, "carbohydrates": 210},
    }


@pytest.fixture
def ingredient_payloads():
    return {
        101: {"extendedIngredients": [
            {"name": "rolled oats", "amount": 0.5, "unit": "cup"},
            {"name": "blueberries", "amount": 50.0, "unit": "g"},
        ]},
        202: {"extendedIngredients": [
            {"name": "chicken breast", "amount": 1, "unit": ""},
            {"name": "salt", "amount": None, "unit": None},
        ]},
        303: {"extendedIngredients": [
            {"name": "salmon fillet", "amount": 200, "unit": "g"},
        ]},
    }
