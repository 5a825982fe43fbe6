import pytest
from django.contrib.auth import get_user_model

from accounts.models import DonorProfile
from tests.factories import FakeMailQueue


@pytest.fixture
def fake_queue():
    return FakeMailQueue()


@pytest.fixture
def create_donor(db):
    User = get_user_model()
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        user = User.objects.create_user(username=f"donor{counter['n']}", password="pw-12345-long")
        data = {
            "full_name": f"Donor {counter['n']}",
            "email": f"donor{counter['n']}@example.com",
            "blood_group": "O-",
        }
        data.update(overrides)
        return DonorProfile.objects.create(user=user, **data)

    return _create
