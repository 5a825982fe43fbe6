import logging

from accounts.models import DonorProfile

logger = logging.getLogger(__name__)


# -------- Donor directory (read side of the notifier) --------

def eligible_donors_queryset():
    return DonorProfile.objects.filter(is_available=True, is_profile_active=True)


class DonorDirectory:
    """
    Query interface over donor profiles.

    Matching is an exact blood group match; no compatibility table and no
    location filter is applied.
    """

    def find_matching(self, blood_group: str):
        qs = (
            eligible_donors_queryset()
            .filter(blood_group=blood_group)
            .order_by("full_name", "id")
        )
        donors = list(qs)
        logger.debug("Directory returned %d donor(s) for %s", len(donors), blood_group)
        return donors
