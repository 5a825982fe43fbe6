from django.contrib import admin, messages

from .models import QueuedEmail


@admin.register(QueuedEmail)
class QueuedEmailAdmin(admin.ModelAdmin):
    list_display = ("id", "to_email", "subject", "status", "attempts", "created_at", "sent_at")
    list_filter = ("status", "created_at")
    search_fields = ("to_email", "subject")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "sent_at", "attempts", "last_error")

    actions = ["requeue_failed"]

    def requeue_failed(self, request, queryset):
        updated = queryset.filter(status="FAILED").update(status="PENDING", attempts=0, last_error="")
        self.message_user(request, f"{updated} email(s) put back in the queue.", level=messages.INFO)
    requeue_failed.short_description = "Requeue selected FAILED emails"
