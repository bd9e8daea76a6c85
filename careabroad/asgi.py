"""
ASGI config for the careabroad project.

Configure settings before importing any Django-dependent modules.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careabroad.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
