import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.core.management.base import BaseCommand
from django.utils import timezone

from communication.models import QueuedEmail

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Send queued emails in batches (text + HTML)."

    def add_arguments(self, parser):
        parser.add_argument("--batch-size", type=int, default=None)

    def handle(self, *args, **options):
        batch_size = options.get("batch_size") or int(getattr(settings, "EMAIL_QUEUE_BATCH_SIZE", 40))
        max_attempts = int(getattr(settings, "EMAIL_QUEUE_MAX_ATTEMPTS", 3))

        qs = list(
            QueuedEmail.objects
            .filter(status="PENDING", attempts__lt=max_attempts)
            .order_by("created_at", "id")[:batch_size]
        )

        if not qs:
            self.stdout.write("No queued emails.")
            return

        sent = 0
        failed = 0

        for item in qs:
            try:
                msg = EmailMultiAlternatives(
                    subject=item.subject,
                    body=item.body,
                    from_email=settings.DEFAULT_FROM_EMAIL,
                    to=[item.to_email],
                )
                if item.html_body:
                    msg.attach_alternative(item.html_body, "text/html")
                msg.send(fail_silently=False)

                item.status = "SENT"
                item.sent_at = timezone.now()
                item.last_error = ""
                item.save(update_fields=["status", "sent_at", "last_error"])
                sent += 1
            except Exception as e:
                logger.error("Sending queued email #%s to %s failed.", item.pk, item.to_email, exc_info=True)
                item.attempts += 1
                item.last_error = str(e)[:2000]
                if item.attempts >= max_attempts:
                    item.status = "FAILED"
                    item.save(update_fields=["attempts", "last_error", "status"])
                else:
                    item.save(update_fields=["attempts", "last_error"])
                failed += 1

        self.stdout.write(f"Sent: {sent}, Failed: {failed}")
