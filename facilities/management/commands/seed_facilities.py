"""
Management command to populate the directory with sample facilities.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from facilities.models import Doctor, Facility, Treatment

FACILITIES = [
    {
        'name': 'Bumrungrad International Hospital',
        'location': 'Bangkok, Thailand',
        'country': 'Thailand',
        'region': 'asia',
        'specialty': 'Cardiology, Orthopedics',
        'rating': 4.8,
        'review_count': 2847,
        'accreditation': ['JCI', 'ISO 9001'],
        'price_range': '$8,000 - $15,000',
        'estimated_cost': 12000,
        'languages': ['English', 'Thai', 'Arabic', 'Japanese'],
        'wait_time': '1-2 weeks',
        'description': 'Internationally accredited hospital serving patients from over 190 countries.',
        'contact_phone': '+66 2 066 8888',
        'contact_email': 'info@bumrungrad.com',
        'contact_website': 'https://www.bumrungrad.com',
        'address': '33 Sukhumvit 3, Bangkok 10110',
        'established': '1980',
        'beds': '580',
        'departments': ['Cardiology', 'Orthopedics', 'Oncology'],
        'image_urls': ['https://images.example.com/bumrungrad.jpg'],
        'treatments': [
            {'name': 'Heart Bypass Surgery', 'price_range': '$15,000 - $25,000', 'duration': '4-6 hours', 'recovery': '6-8 weeks'},
            {'name': 'Hip Replacement', 'price_range': '$12,000 - $18,000', 'duration': '2-3 hours', 'recovery': '3-6 months'},
        ],
        'doctors': [
            {'name': 'Dr. Somchai Rattanakorn', 'specialty': 'Cardiothoracic Surgery', 'experience': '20 years',
             'education': 'Mahidol University', 'languages': ['English', 'Thai']},
        ],
    },
    {
        'name': 'Apollo Hospitals Chennai',
        'location': 'Chennai, India',
        'country': 'India',
        'region': 'asia',
        'specialty': 'Cardiac Surgery, Oncology',
        'rating': 4.6,
        'review_count': 1923,
        'accreditation': ['JCI', 'NABH'],
        'price_range': '$5,000 - $10,000',
        'estimated_cost': 7000,
        'languages': ['English', 'Hindi', 'Tamil'],
        'wait_time': '1 week',
        'description': 'Multi-specialty tertiary care hospital known for cardiac and cancer treatment.',
        'contact_phone': '+91 44 2829 3333',
        'contact_website': 'https://www.apollohospitals.com',
        'address': '21 Greams Lane, Chennai 600006',
        'established': '1983',
        'beds': '550',
        'departments': ['Cardiology', 'Oncology', 'Transplants'],
        'image_urls': ['https://images.example.com/apollo.jpg'],
        'treatments': [
            {'name': 'Cancer Treatment', 'price_range': '$6,000 - $20,000', 'duration': 'Varies', 'recovery': 'Varies'},
        ],
        'doctors': [],
    },
    {
        'name': 'Acibadem Maslak Hospital',
        'location': 'Istanbul, Turkey',
        'country': 'Turkey',
        'region': 'europe',
        'specialty': 'Cosmetic Surgery, Hair Transplant',
        'rating': 4.7,
        'review_count': 1511,
        'accreditation': ['JCI'],
        'price_range': '$3,000 - $9,000',
        'estimated_cost': 6000,
        'languages': ['English', 'Turkish', 'Arabic', 'Russian'],
        'wait_time': '2-3 weeks',
        'description': 'Flagship hospital of the Acibadem group with dedicated international patient services.',
        'contact_website': 'https://www.acibadem.com',
        'address': 'Buyukdere Cd. No:40, Istanbul',
        'established': '2009',
        'beds': '300',
        'departments': ['Plastic Surgery', 'Dermatology'],
        'image_urls': [],
        'treatments': [
            {'name': 'Cosmetic Surgery', 'price_range': '$3,000 - $9,000', 'duration': '2-4 hours', 'recovery': '2-4 weeks'},
        ],
        'doctors': [
            {'name': 'Dr. Elif Kaya', 'specialty': 'Plastic Surgery', 'experience': '15 years',
             'education': 'Istanbul University', 'languages': ['English', 'Turkish']},
        ],
    },
    {
        'name': 'Hospital Angeles Tijuana',
        'location': 'Tijuana, Mexico',
        'country': 'Mexico',
        'region': 'americas',
        'specialty': 'Dental Implants, Bariatric Surgery',
        'rating': 4.4,
        'review_count': 842,
        'accreditation': ['CSG'],
        'price_range': '$2,000 - $6,000',
        'estimated_cost': 4500,
        'languages': ['English', 'Spanish'],
        'wait_time': 'Under 1 week',
        'description': 'Private hospital minutes from the US border.',
        'address': 'Av. Paseo de los Heroes 10999, Tijuana',
        'established': '2000',
        'beds': '120',
        'departments': ['Dentistry', 'Bariatrics'],
        'image_urls': [],
        'treatments': [
            {'name': 'Dental Implants', 'price_range': '$1,200 - $2,500', 'duration': '1-2 hours', 'recovery': '1 week'},
        ],
        'doctors': [],
    },
]


class Command(BaseCommand):
    help = 'Populate the directory with sample facilities, treatments and doctors (idempotent).'

    def handle(self, *args, **options):
        with transaction.atomic():
            for data in FACILITIES:
                data = dict(data)
                treatments = data.pop('treatments')
                doctors = data.pop('doctors')
                facility, created = Facility.objects.update_or_create(name=data['name'], defaults=data)
                for t in treatments:
                    Treatment.objects.update_or_create(facility=facility, name=t['name'], defaults=t)
                for d in doctors:
                    Doctor.objects.update_or_create(facility=facility, name=d['name'], defaults=d)
                self.stdout.write(f"{'created' if created else 'updated'}: {facility.name}")
        self.stdout.write(self.style.SUCCESS(f'Seeded {len(FACILITIES)} facilities.'))
