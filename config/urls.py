from django.contrib import admin
from django.urls import path

admin.site.site_header = "NWU Blood Bank Admin"
admin.site.site_title = "NWU Blood Bank"

urlpatterns = [
    path("admin/", admin.site.urls),
]
