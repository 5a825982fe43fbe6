from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser, DonorProfile


class DonorProfileInline(admin.StackedInline):
    model = DonorProfile
    can_delete = False
    verbose_name_plural = 'Donor Profile'
    extra = 0


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    inlines = (DonorProfileInline,)

    list_display = ('username', 'email', 'role', 'is_active', 'is_staff', 'date_joined')
    list_filter = ('role', 'is_active', 'is_staff')

    fieldsets = UserAdmin.fieldsets + (
        ('Blood Bank Role', {'fields': ('role',)}),
    )

    # changed only through the role actions; is_staff and the admin group follow it
    readonly_fields = ("role",)

    actions = ["make_admin", "make_regular_user"]

    def _set_role(self, queryset, role):
        updated = 0
        for u in queryset:
            if u.role == role:
                continue
            u.set_role(role)
            updated += 1
        return updated

    def make_admin(self, request, queryset):
        updated = self._set_role(queryset, CustomUser.ROLE_ADMIN)
        self.message_user(request, f"{updated} user(s) given the admin role.", level=messages.SUCCESS)
    make_admin.short_description = "Give selected users the admin role"

    def make_regular_user(self, request, queryset):
        if queryset.filter(pk=request.user.pk).exists():
            self.message_user(
                request,
                "Admins cannot remove their own admin role. Nothing was changed.",
                level=messages.ERROR,
            )
            return
        updated = self._set_role(queryset, CustomUser.ROLE_USER)
        self.message_user(request, f"{updated} user(s) set to the regular user role.", level=messages.INFO)
    make_regular_user.short_description = "Set selected users to the regular user role"


@admin.register(DonorProfile)
class DonorProfileAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "full_name",
        "email",
        "blood_group",
        "contact_number",
        "department",
        "is_available",
        "is_profile_active",
        "is_verified",
        "registered_at",
    )
    list_filter = ("blood_group", "is_available", "is_profile_active", "is_verified", "university_role")
    search_fields = ("full_name", "email", "university_id", "contact_number", "user__username")
    ordering = ("-registered_at",)
    autocomplete_fields = ("user",)
    readonly_fields = ("registered_at",)

    fieldsets = (
        ("Donor", {"fields": ("user", "full_name", "email", "contact_number", "blood_group", "last_donation_date")}),
        ("University", {"fields": ("university_id", "university_role", "department")}),
        ("Status", {"fields": ("is_available", "is_profile_active", "is_verified", "allow_contact_visibility")}),
        ("Meta", {"fields": ("registered_at",)}),
    )

    actions = ["mark_verified", "mark_not_verified", "activate_profiles", "deactivate_profiles"]

    def _set_flag(self, request, queryset, field, value, label, level):
        updated = queryset.exclude(**{field: value}).update(**{field: value})
        self.message_user(request, f"{updated} donor profile(s) {label}.", level=level)

    def mark_verified(self, request, queryset):
        self._set_flag(request, queryset, "is_verified", True, "marked VERIFIED", messages.SUCCESS)
    mark_verified.short_description = "Mark selected donors as VERIFIED"

    def mark_not_verified(self, request, queryset):
        self._set_flag(request, queryset, "is_verified", False, "marked NOT VERIFIED", messages.WARNING)
    mark_not_verified.short_description = "Mark selected donors as NOT VERIFIED"

    def activate_profiles(self, request, queryset):
        self._set_flag(request, queryset, "is_profile_active", True, "activated", messages.SUCCESS)
    activate_profiles.short_description = "Activate selected donor profiles"

    def deactivate_profiles(self, request, queryset):
        self._set_flag(request, queryset, "is_profile_active", False, "deactivated", messages.WARNING)
    deactivate_profiles.short_description = "Deactivate selected donor profiles (hidden from matching)"
