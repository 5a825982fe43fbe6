import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from asgiref.sync import async_to_sync, sync_to_async

from .emails import blood_bank_name, build_donor_email
from .models import BloodRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BloodRequestCreated:
    """
    A BloodRequest row was created. `request` is None when the event carries
    no payload (e.g. the row is already gone by the time we look at it).
    """
    request_id: Optional[int]
    request: Optional[BloodRequest] = None


@dataclass
class Delivery:
    donor_id: Optional[int]
    email: str = ""
    queued: bool = False
    skipped: bool = False
    error: Optional[BaseException] = None


class RequestNotifier:
    """
    Pages eligible donors when a new blood request is created.

    Collaborators are injected:
      - directory.find_matching(blood_group) -> list of donor profiles
      - mail_queue.add(to, subject, html, text) -> appends one outbound email

    Each donor's email is built and queued in its own task with its own
    failure boundary; one failed write never stops the others. Nothing is
    retried and nothing is raised to the caller.
    """

    def __init__(self, directory, mail_queue, org_name=None):
        self.directory = directory
        self.mail_queue = mail_queue
        self.org_name = org_name or blood_bank_name()

    def handle(self, event: BloodRequestCreated) -> None:
        async_to_sync(self.notify)(event)

    async def notify(self, event: BloodRequestCreated):
        req = event.request
        rid = event.request_id

        if req is None:
            logger.info("No data associated with the event for request %s.", rid)
            return []

        if not req.is_active:
            logger.info("Request %s is not active (status=%s). No notifications will be sent.", rid, req.status)
            return []

        blood_group = (req.required_blood_group or "").strip()
        if not blood_group:
            logger.info("Request %s does not have a required blood group. No notifications will be sent.", rid)
            return []

        logger.info("Processing request %s for: %s", rid, blood_group)

        try:
            donors = await sync_to_async(self.directory.find_matching)(blood_group)
        except Exception:
            logger.error("Donor lookup failed for request %s; nothing was queued.", rid, exc_info=True)
            return []

        if not donors:
            logger.info("No matching available/active donors found for blood group %s.", blood_group)
            return []

        logger.info("Found %d matching donor(s) for %s.", len(donors), blood_group)

        results = await asyncio.gather(*(self._deliver(req, d, blood_group) for d in donors))

        queued = sum(1 for r in results if r.queued)
        skipped = sum(1 for r in results if r.skipped)
        failed = sum(1 for r in results if r.error is not None)
        logger.info(
            "Finished notifications for request %s: queued=%d skipped=%d failed=%d",
            rid, queued, skipped, failed,
        )
        return list(results)

    async def _deliver(self, req, donor, blood_group) -> Delivery:
        donor_id = getattr(donor, "pk", None)
        email = (getattr(donor, "email", "") or "").strip()

        if not email:
            logger.info("Donor %s has no email. Skipping.", donor_id)
            return Delivery(donor_id=donor_id, skipped=True)

        try:
            message = build_donor_email(req, donor, self.org_name, blood_group=blood_group)
            await sync_to_async(self.mail_queue.add)(
                to=email,
                subject=message.subject,
                html=message.html,
                text=message.text,
            )
        except Exception as e:
            logger.error("Failed to queue email for donor %s (%s).", donor_id, email, exc_info=True)
            return Delivery(donor_id=donor_id, email=email, error=e)

        logger.info("Email queued for donor: %s", email)
        return Delivery(donor_id=donor_id, email=email, queued=True)
