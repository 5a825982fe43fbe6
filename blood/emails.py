from dataclasses import dataclass

from django.conf import settings
from django.template.loader import render_to_string

DEFAULT_BLOOD_BANK_NAME = "NWU Blood Bank"


@dataclass(frozen=True)
class DonorEmail:
    subject: str
    html: str
    text: str


def blood_bank_name() -> str:
    return getattr(settings, "BLOOD_BANK_NAME", DEFAULT_BLOOD_BANK_NAME) or DEFAULT_BLOOD_BANK_NAME


def urgency_label(urgency) -> str:
    """'urgent' -> 'Urgent'; blank -> 'N/A'."""
    if not urgency:
        return "N/A"
    return urgency[:1].upper() + urgency[1:]


def hospital_info(blood_request) -> str:
    name = blood_request.hospital_name or ""
    location = (blood_request.hospital_location or "").strip()
    if location:
        return f"{name} ({location})"
    return name


def request_subject(blood_group: str, org_name: str) -> str:
    return f"Urgent Blood Request: {blood_group} Needed - {org_name}"


def build_donor_email(blood_request, donor, org_name=None, blood_group=None) -> DonorEmail:
    """
    Render the request alert for one donor, as subject + HTML + plain text.
    `blood_group` is the normalised group the donors were matched on.
    """
    org_name = org_name or blood_bank_name()
    blood_group = blood_group or (blood_request.required_blood_group or "").strip()
    context = {
        "donor_name": (donor.full_name or "").strip() or "Donor",
        "patient_name": (blood_request.patient_name or "").strip() or "a patient",
        "blood_group": blood_group,
        "hospital_info": hospital_info(blood_request),
        "units_required": blood_request.units_required,
        "urgency_label": urgency_label(blood_request.urgency),
        "contact_person": blood_request.contact_person,
        "contact_number": blood_request.contact_number,
        "additional_info": (blood_request.additional_info or "").strip(),
        "org_name": org_name,
    }
    return DonorEmail(
        subject=request_subject(blood_group, org_name),
        html=render_to_string("blood/email/donor_request.html", context),
        text=render_to_string("blood/email/donor_request.txt", context),
    )
