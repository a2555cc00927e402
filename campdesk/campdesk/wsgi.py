"""
WSGI config for the campdesk project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'campdesk.settings')

application = get_wsgi_application()
