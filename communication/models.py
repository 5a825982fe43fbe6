from django.db import models


class QueuedEmail(models.Model):
    """
    One outbound email, addressed to a single recipient.

    Writers only append rows; delivery state belongs to the
    send_queued_emails command.
    """
    STATUS = [
        ("PENDING", "Pending"),
        ("SENT", "Sent"),
        ("FAILED", "Failed"),
    ]

    to_email = models.EmailField()
    subject = models.CharField(max_length=200)
    html_body = models.TextField(blank=True)
    body = models.TextField()

    status = models.CharField(max_length=10, choices=STATUS, default="PENDING")
    attempts = models.PositiveIntegerField(default=0)
    last_error = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=["status", "created_at"], name="queuedemail_status_idx"),
        ]

    def __str__(self):
        return f"{self.to_email} [{self.status}]"
