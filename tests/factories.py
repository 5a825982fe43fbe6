from accounts.models import DonorProfile
from blood.models import BloodRequest


class FakeDirectory:
    def __init__(self, donors=None, error=None):
        self.donors = list(donors or [])
        self.error = error
        self.calls = []

    def find_matching(self, blood_group):
        self.calls.append(blood_group)
        if self.error is not None:
            raise self.error
        return [
            d for d in self.donors
            if d.blood_group == blood_group and d.is_available and d.is_profile_active
        ]


class FakeMailQueue:
    def __init__(self, failing=()):
        self.failing = set(failing)
        self.records = []

    def add(self, to, subject, html, text):
        if to in self.failing:
            raise RuntimeError(f"mail queue rejected {to}")
        self.records.append({"to": to, "message": {"subject": subject, "html": html, "text": text}})


def make_request(**overrides):
    data = {
        "patient_name": "Jane Roe",
        "required_blood_group": "O-",
        "units_required": 2,
        "hospital_name": "City Hospital",
        "hospital_location": "Mahikeng",
        "urgency": "urgent",
        "contact_person": "Sam Smith",
        "contact_number": "0123456789",
        "additional_info": "",
        "status": BloodRequest.STATUS_ACTIVE,
    }
    data.update(overrides)
    return BloodRequest(**data)


def make_donor(pk=None, **overrides):
    data = {
        "full_name": "Alex Donor",
        "email": "alex@example.com",
        "blood_group": "O-",
        "is_available": True,
        "is_profile_active": True,
    }
    data.update(overrides)
    donor = DonorProfile(**data)
    donor.pk = pk
    return donor


