"""
WSGI config for campus_coffee project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "campus_coffee.settings")

application = get_wsgi_application()
