import pytest

from inmomatch.models import Listing, UserProfile


def make_listing(**overrides) -> Listing:
    data = {
        "id": "prop-1",
        "category": "Departamento",
        "operation": "Venta",
        "price": 150000,
        "currency": "USD",
        "total_area": 50,
        "covered_area": 45,
        "rooms": 2,
        "financing_ok": True,
        "professional_ok": False,
        "pets_allowed": False,
        "has_parking": False,
        "amenities": ["Pileta"],
        "age_label": "5",
        "address": "Medrano 1200",
        "neighborhood": "Palermo Soho",
        "region": "CABA",
    }
    data.update(overrides)
    return Listing(**data)


def make_profile(**overrides) -> UserProfile:
    data = {
        "id": "user-1",
        "full_name": "Ana Pérez",
        "categories": ["Departamento"],
        "operation": "Venta",
        "price_min": 140000,
        "price_max": 160000,
        "neighborhoods": ["Palermo"],
        "rooms": "2",
        "min_area": 45,
        "amenities": ["Pileta"],
        "age_labels": ["5"],
        "wants_parking": False,
        "requires_financing": False,
        "requires_professional_use": False,
        "requires_pets_allowed": False,
    }
    data.update(overrides)
    return UserProfile(**data)


def blank_profile(**overrides) -> UserProfile:
    """Perfil sin ninguna preferencia cargada."""
    return UserProfile(id=overrides.pop("id", "user-blank"), **overrides)


@pytest.fixture
def listing() -> Listing:
    return make_listing()


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()
