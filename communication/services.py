import logging

from .models import QueuedEmail

logger = logging.getLogger(__name__)

SUBJECT_MAX_LENGTH = QueuedEmail._meta.get_field("subject").max_length


def queue_email(to, subject, text, html=""):
    """
    Appends one PENDING email to the outbound queue.
    Delivery happens later in `manage.py send_queued_emails`.
    """
    if len(subject) > SUBJECT_MAX_LENGTH:
        logger.warning(
            "Subject for %s is %d chars; truncating to %d.",
            to, len(subject), SUBJECT_MAX_LENGTH,
        )
        subject = subject[:SUBJECT_MAX_LENGTH]

    item = QueuedEmail.objects.create(
        to_email=to,
        subject=subject,
        body=text,
        html_body=html or "",
    )
    logger.debug("Queued email #%s to %s", item.pk, to)
    return item


class MailQueue:
    """Append-only mail queue handed to the notifier."""

    def add(self, to, subject, html, text):
        return queue_email(to, subject=subject, text=text, html=html)
