from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission
from django.conf import settings
from django.utils import timezone

BLOOD_GROUPS = (
    ('A+', 'A+'), ('A-', 'A-'),
    ('B+', 'B+'), ('B-', 'B-'),
    ('AB+', 'AB+'), ('AB-', 'AB-'),
    ('O+', 'O+'), ('O-', 'O-'),
)

ADMIN_GROUP_NAME = "Blood Bank Admins"
ADMIN_APP_LABELS = ("accounts", "blood", "communication")


def blood_bank_admin_group():
    group, _ = Group.objects.get_or_create(name=ADMIN_GROUP_NAME)
    group.permissions.set(Permission.objects.filter(content_type__app_label__in=ADMIN_APP_LABELS))
    return group


class CustomUser(AbstractUser):
    """
    Core User model.
    Every account is a plain user; admins manage donors, requests and roles.
    """
    ROLE_USER = "user"
    ROLE_ADMIN = "admin"
    ROLES = (
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    )

    role = models.CharField(max_length=10, choices=ROLES, default=ROLE_USER, db_index=True)

    def set_role(self, role):
        """
        Admins get staff access plus the Blood Bank Admins group; regular
        users lose both. Superusers keep is_staff whatever their role.
        """
        self.role = role
        if role == self.ROLE_ADMIN:
            self.is_staff = True
        elif not self.is_superuser:
            self.is_staff = False
        self.save(update_fields=["role", "is_staff"])

        group = blood_bank_admin_group()
        if role == self.ROLE_ADMIN:
            self.groups.add(group)
        else:
            self.groups.remove(group)

    def __str__(self):
        return self.username


class DonorProfile(models.Model):
    """
    A person willing to donate. One profile per account.

    Only is_available and is_profile_active decide whether the donor is paged
    for new requests; is_verified and allow_contact_visibility only control
    what requesters may see.
    """
    UNIVERSITY_ROLES = (
        ("student", "Student"),
        ("faculty", "Faculty"),
        ("staff", "Staff"),
        ("alumni", "Alumni"),
    )

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='donor_profile')

    email = models.EmailField(blank=True)
    full_name = models.CharField(max_length=150)
    university_id = models.CharField(max_length=50, blank=True)
    university_role = models.CharField(max_length=20, choices=UNIVERSITY_ROLES, blank=True)
    department = models.CharField(max_length=120, blank=True)

    blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS)
    contact_number = models.CharField(max_length=20, blank=True)
    last_donation_date = models.DateField(null=True, blank=True)

    is_available = models.BooleanField(default=True)
    is_profile_active = models.BooleanField(default=True)
    is_verified = models.BooleanField(default=False, help_text="Checked by an admin.")
    allow_contact_visibility = models.BooleanField(default=False)

    registered_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["full_name"]
        indexes = [
            models.Index(fields=["blood_group", "is_available", "is_profile_active"], name="donor_match_idx"),
        ]

    def __str__(self):
        return f"{self.full_name or self.user.username} ({self.blood_group or 'N/A'})"
