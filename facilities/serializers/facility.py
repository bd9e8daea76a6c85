from rest_framework import serializers

from facilities.models import Doctor, Facility, Treatment
from facilities.services.ranking import within_budget


class FacilitySerializer(serializers.ModelSerializer):
    class Meta:
        model = Facility
        fields = '__all__'


class TreatmentSerializer(serializers.ModelSerializer):
    facility_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Treatment
        exclude = ['facility']


class DoctorSerializer(serializers.ModelSerializer):
    facility_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Doctor
        exclude = ['facility']


class RankedFacilitySerializer(FacilitySerializer):
    """Facility row for the quiz results page.

    ``within_budget`` drives the "Within Budget" badge and compares against
    the stated budget itself, without headroom.  Pass ``budget`` in the
    serializer context.
    """
    within_budget = serializers.SerializerMethodField()

    def get_within_budget(self, obj) -> bool:
        return within_budget(obj, self.context.get('budget'))
