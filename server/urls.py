"""Main URL mapping configuration file."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('api/', include('server.apps.files.urls', namespace='files')),
    path('admin/', admin.site.urls),
]
