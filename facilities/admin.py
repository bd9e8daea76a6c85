"""
Django admin registrations for the directory models.

Operators maintain facilities, treatments and doctors through the
``/admin/`` URL; the public API only reads them.  Treatments and
doctors are edited inline on their facility.
"""

from django.contrib import admin

from .models import Doctor, Facility, Treatment


class TreatmentInline(admin.TabularInline):
    model = Treatment
    extra = 0


class DoctorInline(admin.TabularInline):
    model = Doctor
    extra = 0


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'country', 'region', 'rating', 'estimated_cost', 'updated_at')
    list_filter = ('region', 'country')
    search_fields = ('name', 'specialty', 'location')
    inlines = [TreatmentInline, DoctorInline]


@admin.register(Treatment)
class TreatmentAdmin(admin.ModelAdmin):
    list_display = ('name', 'facility', 'price_range', 'duration')
    search_fields = ('name', 'facility__name')


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('name', 'facility', 'specialty', 'experience')
    list_filter = ('specialty',)
    search_fields = ('name', 'facility__name')
