from django.apps import AppConfig
from django.conf import settings


class BloodConfig(AppConfig):
    name = "blood"
    default_auto_field = "django.db.models.BigAutoField"

    notifier = None
    subscription = None

    def ready(self):
        from communication.services import MailQueue
        from .matching import DonorDirectory
        from .notifier import RequestNotifier
        from .signals import RequestCreatedSubscription

        # one notifier per process, wired with the real directory + mail queue
        self.notifier = RequestNotifier(
            directory=DonorDirectory(),
            mail_queue=MailQueue(),
            org_name=getattr(settings, "BLOOD_BANK_NAME", None),
        )
        self.subscription = RequestCreatedSubscription(self.notifier)
        self.subscription.connect()
