import pytest
from django.contrib.admin.helpers import ACTION_CHECKBOX_NAME
from django.urls import reverse

from accounts.models import ADMIN_GROUP_NAME, CustomUser
from blood.models import BloodRequest
from communication.models import QueuedEmail

pytestmark = pytest.mark.django_db


def run_action(client, url_name, action, ids):
    return client.post(
        reverse(url_name),
        {"action": action, ACTION_CHECKBOX_NAME: [str(i) for i in ids]},
        follow=True,
    )


def test_request_status_actions(admin_client, create_donor, django_capture_on_commit_callbacks):
    create_donor(email="a@x.com", blood_group="O-")
    req = BloodRequest.objects.create(
        patient_name="Jane",
        required_blood_group="O-",
        hospital_name="City Hospital",
        contact_person="Sam",
        contact_number="1",
    )

    run_action(admin_client, "admin:blood_bloodrequest_changelist", "mark_fulfilled", [req.pk])
    req.refresh_from_db()
    assert req.status == BloodRequest.STATUS_FULFILLED

    with django_capture_on_commit_callbacks(execute=True):
        run_action(admin_client, "admin:blood_bloodrequest_changelist", "mark_active", [req.pk])
    req.refresh_from_db()
    assert req.status == BloodRequest.STATUS_ACTIVE
    assert not QueuedEmail.objects.exists()


def test_donor_verification_and_activation(admin_client, create_donor):
    donor = create_donor(is_verified=False)

    run_action(admin_client, "admin:accounts_donorprofile_changelist", "mark_verified", [donor.pk])
    run_action(admin_client, "admin:accounts_donorprofile_changelist", "deactivate_profiles", [donor.pk])

    donor.refresh_from_db()
    assert donor.is_verified is True
    assert donor.is_profile_active is False
    assert donor.is_available is True


def test_role_actions(admin_client, admin_user):
    other = CustomUser.objects.create_user(username="someone", password="pw-12345-long")

    run_action(admin_client, "admin:accounts_customuser_changelist", "make_admin", [other.pk, admin_user.pk])
    other.refresh_from_db()
    admin_user.refresh_from_db()
    assert other.role == CustomUser.ROLE_ADMIN
    assert admin_user.role == CustomUser.ROLE_ADMIN

    response = run_action(admin_client, "admin:accounts_customuser_changelist", "make_regular_user", [other.pk, admin_user.pk])
    other.refresh_from_db()
    admin_user.refresh_from_db()
    assert other.role == CustomUser.ROLE_ADMIN
    assert admin_user.role == CustomUser.ROLE_ADMIN
    assert b"cannot remove their own admin role" in response.content

    run_action(admin_client, "admin:accounts_customuser_changelist", "make_regular_user", [other.pk])
    other.refresh_from_db()
    assert other.role == CustomUser.ROLE_USER


def test_requeue_failed_emails(admin_client):
    item = QueuedEmail.objects.create(to_email="a@x.com", subject="S", body="T", status="FAILED", attempts=3, last_error="x")

    run_action(admin_client, "admin:communication_queuedemail_changelist", "requeue_failed", [item.pk])

    item.refresh_from_db()
    assert (item.status, item.attempts, item.last_error) == ("PENDING", 0, "")


def test_promoted_user_can_open_request_admin(admin_client, client):
    staffer = CustomUser.objects.create_user(username="staffer", password="pw-12345-long")
    changelist = reverse("admin:blood_bloodrequest_changelist")

    client.force_login(staffer)
    assert client.get(changelist).status_code == 302

    run_action(admin_client, "admin:accounts_customuser_changelist", "make_admin", [staffer.pk])
    staffer.refresh_from_db()
    assert staffer.role == CustomUser.ROLE_ADMIN
    assert staffer.is_staff is True
    assert staffer.groups.filter(name=ADMIN_GROUP_NAME).exists()

    client.force_login(staffer)
    assert client.get(changelist).status_code == 200


def test_demoted_user_loses_admin_access(admin_client, client):
    staffer = CustomUser.objects.create_user(username="staffer", password="pw-12345-long")
    staffer.set_role(CustomUser.ROLE_ADMIN)

    run_action(admin_client, "admin:accounts_customuser_changelist", "make_regular_user", [staffer.pk])
    staffer.refresh_from_db()
    assert staffer.role == CustomUser.ROLE_USER
    assert staffer.is_staff is False
    assert not staffer.groups.filter(name=ADMIN_GROUP_NAME).exists()

    client.force_login(staffer)
    assert client.get(reverse("admin:blood_bloodrequest_changelist")).status_code == 302


def test_superuser_keeps_staff_when_set_to_regular_role(admin_user):
    admin_user.set_role(CustomUser.ROLE_USER)

    admin_user.refresh_from_db()
    assert admin_user.is_staff is True
