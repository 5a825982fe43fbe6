from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from accounts.models import BLOOD_GROUPS


class BloodRequest(models.Model):
    """
    A need for blood posted by a requester.

    Donors are paged once, when the request is created (see blood.signals).
    Later status changes never page anyone.
    """
    STATUS_ACTIVE = "active"
    STATUS_FULFILLED = "fulfilled"
    STATUS_CANCELLED = "cancelled"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_FULFILLED, "Fulfilled"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    URGENCY_CHOICES = [
        ("urgent", "Urgent"),
        ("moderate", "Moderate"),
        ("low", "Low"),
    ]

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="blood_requests",
    )
    requester_email = models.EmailField(blank=True)

    patient_name = models.CharField(max_length=150)
    required_blood_group = models.CharField(max_length=5, choices=BLOOD_GROUPS)
    units_required = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    hospital_name = models.CharField(max_length=200)
    hospital_location = models.CharField(max_length=200, blank=True)
    urgency = models.CharField(max_length=10, choices=URGENCY_CHOICES, blank=True)

    contact_person = models.CharField(max_length=150)
    contact_number = models.CharField(max_length=20)
    additional_info = models.TextField(blank=True)

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE, db_index=True)
    requested_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-requested_at"]
        indexes = [
            models.Index(fields=["status", "requested_at"], name="bloodreq_status_idx"),
        ]

    def __str__(self):
        return f"Need {self.required_blood_group} at {self.hospital_name} ({self.status})"

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE
