from blood.emails import build_donor_email, hospital_info, urgency_label
from tests.factories import make_donor, make_request


def test_urgency_label():
    assert urgency_label("urgent") == "Urgent"
    assert urgency_label("moderate") == "Moderate"
    assert urgency_label("") == "N/A"
    assert urgency_label(None) == "N/A"


def test_hospital_info_with_and_without_location():
    assert hospital_info(make_request(hospital_name="City Hospital", hospital_location="Mahikeng")) == "City Hospital (Mahikeng)"
    assert hospital_info(make_request(hospital_name="City Hospital", hospital_location="")) == "City Hospital"


def test_both_bodies_carry_every_field():
    req = make_request(
        patient_name="Jane Roe",
        required_blood_group="A-",
        units_required=3,
        hospital_name="City Hospital",
        hospital_location="Mahikeng",
        urgency="moderate",
        contact_person="Sam Smith",
        contact_number="0123456789",
        additional_info="Bring ID",
    )
    email = build_donor_email(req, make_donor(full_name="Alex Donor"), "NWU Blood Bank")

    assert email.subject == "Urgent Blood Request: A- Needed - NWU Blood Bank"
    for body in (email.html, email.text):
        assert "Dear Alex Donor" in body
        assert "Jane Roe" in body
        assert "City Hospital (Mahikeng)" in body
        assert "3" in body
        assert "Moderate" in body
        assert "Sam Smith (0123456789)" in body
        assert "Additional Information: Bring ID" in body


def test_fallbacks_and_optional_lines():
    req = make_request(patient_name="", urgency="", additional_info="", hospital_location="")
    email = build_donor_email(req, make_donor(full_name="  "), "NWU Blood Bank")

    for body in (email.html, email.text):
        assert "Dear Donor" in body
        assert "a patient" in body
        assert "Urgency:" in body and "N/A" in body
        assert "Additional Information" not in body
        assert "()" not in body


def test_html_escapes_user_text_but_plain_text_does_not():
    req = make_request(additional_info="<b>Ward 4 & 5</b>")
    email = build_donor_email(req, make_donor(), "NWU Blood Bank")

    assert "&lt;b&gt;Ward 4 &amp; 5&lt;/b&gt;" in email.html
    assert "<b>Ward 4 & 5</b>" in email.text


def test_org_name_defaults_to_setting(settings):
    settings.BLOOD_BANK_NAME = "Campus Blood Bank"
    email = build_donor_email(make_request(required_blood_group="O+"), make_donor())

    assert email.subject == "Urgent Blood Request: O+ Needed - Campus Blood Bank"
    assert "Campus Blood Bank community" in email.text


def test_explicit_blood_group_overrides_raw_field():
    email = build_donor_email(make_request(required_blood_group=" AB- "), make_donor(), "NWU Blood Bank", blood_group="AB-")

    assert email.subject == "Urgent Blood Request: AB- Needed - NWU Blood Bank"
    assert "(AB-)" in email.text
