import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import camps.models

SKILL_LEVELS = [
    ('beginner', 'Beginner - Just starting out'),
    ('intermediate', 'Intermediate - Some experience'),
    ('advanced', 'Advanced - Significant experience'),
    ('all_levels', 'All levels'),
]
STAFF_ROLES = [('manager', 'Manager'), ('coach', 'Coach'), ('volunteer', 'Volunteer')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('core', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Camp',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('slug', models.CharField(default=camps.models._camp_slug, editable=False, max_length=32, unique=True)),
                ('is_virtual', models.BooleanField(default=False)),
                ('virtual_meeting_url', models.URLField(blank=True)),
                ('street_address', models.CharField(blank=True, max_length=255)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('state', models.CharField(blank=True, max_length=50)),
                ('zip_code', models.CharField(blank=True, max_length=20)),
                ('additional_location_details', models.TextField(blank=True)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('registration_start_date', models.DateField()),
                ('registration_end_date', models.DateField()),
                ('price', models.DecimalField(decimal_places=2, default=0, max_digits=8)),
                ('capacity', models.PositiveIntegerField()),
                ('min_age', models.PositiveSmallIntegerField()),
                ('max_age', models.PositiveSmallIntegerField()),
                ('waitlist_enabled', models.BooleanField(default=True)),
                ('type', models.CharField(
                    choices=[('one_on_one', 'One-on-one'), ('group', 'Group'), ('team', 'Team'), ('virtual', 'Virtual')],
                    default='group',
                    max_length=20,
                )),
                ('visibility', models.CharField(
                    choices=[('public', 'Public'), ('private', 'Private')],
                    default='public',
                    max_length=10,
                )),
                ('scheduling_type', models.CharField(
                    choices=[('fixed', 'Fixed weekly schedule'), ('availability', 'Bookable availability slots')],
                    default='fixed',
                    max_length=20,
                )),
                ('repeat_type', models.CharField(
                    choices=[('none', 'Does not repeat'), ('weekly', 'Weekly'), ('monthly', 'Monthly')],
                    default='none',
                    max_length=10,
                )),
                ('repeat_count', models.PositiveSmallIntegerField(default=0)),
                ('is_deleted', models.BooleanField(default=False)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
                ('is_cancelled', models.BooleanField(default=False)),
                ('cancelled_at', models.DateTimeField(blank=True, null=True)),
                ('cancel_reason', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='camps_created',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('organization', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camps',
                    to='accounts.organization',
                )),
            ],
            options={
                'ordering': ['start_date', 'name'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(end_date__gte=models.F('start_date')),
                        name='camp_end_after_start',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(max_age__gte=models.F('min_age')),
                        name='camp_age_range',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='CampSport',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('custom_sport', models.CharField(blank=True, max_length=100)),
                ('skill_level', models.CharField(choices=SKILL_LEVELS, max_length=20)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='sports',
                    to='camps.camp',
                )),
                ('sport', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='+',
                    to='core.sport',
                )),
            ],
        ),
        migrations.CreateModel(
            name='CampSchedule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('day_of_week', models.PositiveSmallIntegerField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='schedules',
                    to='camps.camp',
                )),
            ],
            options={
                'ordering': ['day_of_week', 'start_time'],
            },
        ),
        migrations.CreateModel(
            name='ScheduleException',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('exception_date', models.DateField()),
                ('day_of_week', models.PositiveSmallIntegerField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('status', models.CharField(
                    choices=[('active', 'Active'), ('cancelled', 'Cancelled'), ('rescheduled', 'Rescheduled')],
                    default='cancelled',
                    max_length=20,
                )),
                ('reason', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='schedule_exceptions',
                    to='camps.camp',
                )),
                ('original_schedule', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='exceptions',
                    to='camps.campschedule',
                )),
            ],
            options={
                'ordering': ['exception_date', 'start_time'],
            },
        ),
        migrations.CreateModel(
            name='CampStaff',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=STAFF_ROLES, max_length=20)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='staff',
                    to='camps.camp',
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camp_assignments',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name_plural': 'Camp staff',
                'constraints': [
                    models.UniqueConstraint(fields=('camp', 'user'), name='unique_camp_staff'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Registration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('paid', models.BooleanField(default=False)),
                ('waitlisted', models.BooleanField(default=False)),
                ('registered_at', models.DateTimeField(auto_now_add=True)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='registrations',
                    to='camps.camp',
                )),
                ('child', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='registrations',
                    to='accounts.child',
                )),
            ],
            options={
                'ordering': ['-registered_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('camp', 'child'), name='unique_camp_registration'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AvailabilitySlot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('slot_date', models.DateField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('duration_minutes', models.PositiveIntegerField()),
                ('status', models.CharField(
                    choices=[('available', 'Available'), ('booked', 'Booked'), ('unavailable', 'Unavailable')],
                    default='available',
                    max_length=20,
                )),
                ('max_bookings', models.PositiveIntegerField(default=1)),
                ('current_bookings', models.PositiveIntegerField(default=0)),
                ('notes', models.TextField(blank=True)),
                ('buffer_before', models.PositiveIntegerField(default=0, help_text='Minutes kept free before the slot.')),
                ('buffer_after', models.PositiveIntegerField(default=0, help_text='Minutes kept free after the slot.')),
                ('is_recurring', models.BooleanField(default=False)),
                ('recurrence_rule', models.CharField(
                    blank=True,
                    choices=[('daily', 'Daily'), ('weekly', 'Weekly')],
                    max_length=10,
                )),
                ('recurrence_end_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='availability_slots',
                    to='camps.camp',
                )),
                ('creator', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='slots_created',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('parent_slot', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='occurrences',
                    to='camps.availabilityslot',
                )),
            ],
            options={
                'ordering': ['slot_date', 'start_time'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(current_bookings__lte=models.F('max_bookings')),
                        name='slot_bookings_within_capacity',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(max_bookings__gte=1),
                        name='slot_max_bookings_positive',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='SlotBooking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.CharField(
                    choices=[
                        ('confirmed', 'Confirmed'),
                        ('cancelled', 'Cancelled'),
                        ('rescheduled', 'Rescheduled'),
                        ('waitlisted', 'Waitlisted'),
                    ],
                    default='confirmed',
                    max_length=20,
                )),
                ('booking_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('cancelled_at', models.DateTimeField(blank=True, null=True)),
                ('cancel_reason', models.TextField(blank=True)),
                ('notes', models.TextField(blank=True)),
                ('notification_sent', models.BooleanField(default=False)),
                ('reminder_sent', models.BooleanField(default=False)),
                ('feedback_sent', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('child', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='slot_bookings',
                    to='accounts.child',
                )),
                ('parent', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='slot_bookings',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('registration', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='slot_bookings',
                    to='camps.registration',
                )),
                ('rescheduled_from', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='rescheduled_to',
                    to='camps.slotbooking',
                )),
                ('slot', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='bookings',
                    to='camps.availabilityslot',
                )),
            ],
            options={
                'ordering': ['-booking_date'],
                'constraints': [
                    models.UniqueConstraint(
                        condition=models.Q(status='confirmed'),
                        fields=('slot', 'child'),
                        name='unique_confirmed_booking_per_child',
                    ),
                ],
            },
        ),
    ]
