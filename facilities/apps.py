from concurrent.futures import ThreadPoolExecutor

from django.apps import AppConfig
from django.conf import settings


class FacilitiesConfig(AppConfig):
    """Owns the process-wide facility repository and read executor.

    Both are built once when Django finishes loading apps and handed to
    the views through :mod:`facilities.services.repository`.
    """
    name = 'facilities'
    verbose_name = 'Facility directory'
    default_auto_field = 'django.db.models.BigAutoField'

    repository = None
    read_executor = None

    def ready(self) -> None:
        from .services.repository import FacilityRepository

        if self.repository is None:
            self.repository = FacilityRepository()
        if self.read_executor is None:
            self.read_executor = ThreadPoolExecutor(
                max_workers=settings.FACILITY_READ_WORKERS,
                thread_name_prefix='facility-read',
            )
