import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Facility',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('country', models.CharField(blank=True, db_index=True, max_length=100)),
                ('region', models.CharField(blank=True, db_index=True, max_length=50)),
                ('specialty', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('rating', models.FloatField(db_index=True, default=0, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('review_count', models.PositiveIntegerField(default=0)),
                ('accreditation', models.JSONField(blank=True, default=list)),
                ('price_range', models.CharField(blank=True, help_text="Display string, e.g. '$8,000 - $15,000'", max_length=100)),
                ('estimated_cost', models.PositiveIntegerField(db_index=True, default=0, help_text='Used for budget filtering')),
                ('languages', models.JSONField(blank=True, default=list)),
                ('wait_time', models.CharField(blank=True, max_length=100)),
                ('contact_phone', models.CharField(blank=True, max_length=50)),
                ('contact_email', models.EmailField(blank=True, max_length=254)),
                ('contact_website', models.URLField(blank=True)),
                ('address', models.CharField(blank=True, max_length=500)),
                ('established', models.CharField(blank=True, max_length=20)),
                ('beds', models.CharField(blank=True, max_length=20)),
                ('departments', models.JSONField(blank=True, default=list)),
                ('image_urls', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'facilities',
                'ordering': ['-rating', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('specialty', models.CharField(blank=True, max_length=255)),
                ('experience', models.CharField(blank=True, max_length=100)),
                ('education', models.CharField(blank=True, max_length=255)),
                ('languages', models.JSONField(blank=True, default=list)),
                ('image_url', models.URLField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('facility', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='doctors', to='facilities.facility')),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Treatment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('price_range', models.CharField(blank=True, max_length=100)),
                ('duration', models.CharField(blank=True, max_length=100)),
                ('recovery', models.CharField(blank=True, max_length=100)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('facility', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='treatments', to='facilities.facility')),
            ],
            options={
                'ordering': ['name'],
            },
        ),
    ]
