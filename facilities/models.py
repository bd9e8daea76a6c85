"""
Database models for the facility directory.

These models capture the three concepts the front-end pages display:
facilities (hospitals and clinics abroad), the treatments they offer and
the doctors affiliated with them.  Field names mirror the JSON keys the
front-end expects so rows can be serialized without renaming.

The API never writes these rows; operators maintain them through the
Django admin.
"""
from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Facility(models.Model):
    """A hospital or clinic listed in the directory."""
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    country = models.CharField(max_length=100, blank=True, db_index=True)
    # Quiz region slug such as 'asia' or 'middle-east'
    region = models.CharField(max_length=50, blank=True, db_index=True)
    specialty = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    rating = models.FloatField(
        default=0,
        db_index=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    review_count = models.PositiveIntegerField(default=0)
    accreditation = models.JSONField(default=list, blank=True)

    price_range = models.CharField(max_length=100, blank=True, help_text="Display string, e.g. '$8,000 - $15,000'")
    estimated_cost = models.PositiveIntegerField(default=0, db_index=True, help_text="Used for budget filtering")
    languages = models.JSONField(default=list, blank=True)
    wait_time = models.CharField(max_length=100, blank=True)

    contact_phone = models.CharField(max_length=50, blank=True)
    contact_email = models.EmailField(blank=True)
    contact_website = models.URLField(blank=True)
    address = models.CharField(max_length=500, blank=True)

    established = models.CharField(max_length=20, blank=True)
    beds = models.CharField(max_length=20, blank=True)
    departments = models.JSONField(default=list, blank=True)
    # The first image is the hero image on the facility page
    image_urls = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-rating', 'id']
        verbose_name_plural = 'facilities'

    def __str__(self) -> str:
        return f"{self.name} ({self.country})"


class Treatment(models.Model):
    """A procedure offered by a facility."""
    facility = models.ForeignKey(Facility, on_delete=models.CASCADE, related_name='treatments')
    name = models.CharField(max_length=255)
    price_range = models.CharField(max_length=100, blank=True)
    duration = models.CharField(max_length=100, blank=True)
    recovery = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return f"{self.name} @ {self.facility_id}"


class Doctor(models.Model):
    """A practitioner affiliated with a facility."""
    facility = models.ForeignKey(Facility, on_delete=models.CASCADE, related_name='doctors')
    name = models.CharField(max_length=255)
    specialty = models.CharField(max_length=255, blank=True)
    experience = models.CharField(max_length=100, blank=True)
    education = models.CharField(max_length=255, blank=True)
    languages = models.JSONField(default=list, blank=True)
    image_url = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return f"{self.name} ({self.specialty})"
