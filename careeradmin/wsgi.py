"""
WSGI config for the careeradmin project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careeradmin.settings")

application = get_wsgi_application()
