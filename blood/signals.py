import logging

from django.db import transaction
from django.db.models.signals import post_save

from .models import BloodRequest
from .notifier import BloodRequestCreated

logger = logging.getLogger(__name__)

DISPATCH_UID = "blood.notify_donors_on_new_request"


class RequestCreatedSubscription:
    """
    Connects post_save(created=True) on BloodRequest to a RequestNotifier.

    The notifier runs once the creating transaction commits, against a fresh
    snapshot of the row. Later saves (status changes) are ignored.
    """

    def __init__(self, notifier):
        self.notifier = notifier

    def connect(self):
        post_save.connect(self.on_post_save, sender=BloodRequest, weak=False, dispatch_uid=DISPATCH_UID)

    def disconnect(self):
        post_save.disconnect(sender=BloodRequest, dispatch_uid=DISPATCH_UID)

    def on_post_save(self, sender, instance, created, raw=False, **kwargs):
        # fixtures (loaddata) must not page donors
        if not created or raw:
            return

        request_id = instance.pk
        logger.info("New blood request created (ID: %s).", request_id)
        transaction.on_commit(lambda: self.dispatch(request_id), robust=True)

    def dispatch(self, request_id):
        blood_request = BloodRequest.objects.filter(pk=request_id).first()
        self.notifier.handle(BloodRequestCreated(request_id=request_id, request=blood_request))
