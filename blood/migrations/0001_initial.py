import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="BloodRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("requester_email", models.EmailField(blank=True, max_length=254)),
                ("patient_name", models.CharField(max_length=150)),
                ("required_blood_group", models.CharField(choices=[("A+", "A+"), ("A-", "A-"), ("B+", "B+"), ("B-", "B-"), ("AB+", "AB+"), ("AB-", "AB-"), ("O+", "O+"), ("O-", "O-")], max_length=5)),
                ("units_required", models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ("hospital_name", models.CharField(max_length=200)),
                ("hospital_location", models.CharField(blank=True, max_length=200)),
                ("urgency", models.CharField(blank=True, choices=[("urgent", "Urgent"), ("moderate", "Moderate"), ("low", "Low")], max_length=10)),
                ("contact_person", models.CharField(max_length=150)),
                ("contact_number", models.CharField(max_length=20)),
                ("additional_info", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("active", "Active"), ("fulfilled", "Fulfilled"), ("cancelled", "Cancelled")], db_index=True, default="active", max_length=10)),
                ("requested_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("requester", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="blood_requests", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-requested_at"],
                "indexes": [models.Index(fields=["status", "requested_at"], name="bloodreq_status_idx")],
            },
        ),
    ]
