from django.contrib import admin, messages

from .models import BloodRequest


@admin.register(BloodRequest)
class BloodRequestAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "patient_name",
        "required_blood_group",
        "units_required",
        "hospital_name",
        "urgency",
        "status",
        "requested_at",
        "requester",
    )
    list_filter = ("status", "urgency", "required_blood_group", "requested_at")
    search_fields = (
        "patient_name",
        "hospital_name",
        "hospital_location",
        "contact_person",
        "contact_number",
        "requester__username",
        "requester_email",
    )
    ordering = ("-requested_at",)
    autocomplete_fields = ("requester",)
    readonly_fields = ("requested_at",)

    fieldsets = (
        ("Patient / Need", {
            "fields": ("patient_name", "required_blood_group", "units_required", "urgency")
        }),
        ("Hospital", {
            "fields": ("hospital_name", "hospital_location")
        }),
        ("Contact", {
            "fields": ("contact_person", "contact_number", "additional_info")
        }),
        ("Request State", {
            "fields": ("status", "requested_at")
        }),
        ("Meta", {
            "fields": ("requester", "requester_email")
        }),
    )

    actions = ["mark_fulfilled", "mark_cancelled", "mark_active"]

    def _set_status(self, request, queryset, status, level):
        updated = 0
        for r in queryset:
            if r.status == status:
                continue
            r.status = status
            r.save(update_fields=["status"])
            updated += 1
        self.message_user(request, f"{updated} request(s) marked {status.upper()}.", level=level)

    def mark_fulfilled(self, request, queryset):
        self._set_status(request, queryset, BloodRequest.STATUS_FULFILLED, messages.SUCCESS)
    mark_fulfilled.short_description = "Mark selected requests as FULFILLED"

    def mark_cancelled(self, request, queryset):
        self._set_status(request, queryset, BloodRequest.STATUS_CANCELLED, messages.WARNING)
    mark_cancelled.short_description = "Mark selected requests as CANCELLED"

    def mark_active(self, request, queryset):
        self._set_status(request, queryset, BloodRequest.STATUS_ACTIVE, messages.INFO)
    mark_active.short_description = "Mark selected requests as ACTIVE"
