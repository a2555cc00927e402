import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Organization',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(
                    blank=True,
                    help_text='Public URL name; generated from the name when left empty.',
                    max_length=220,
                    unique=True,
                )),
                ('description', models.TextField(blank=True)),
                ('mission', models.TextField(blank=True)),
                ('logo', models.FileField(blank=True, upload_to='uploads/')),
                ('contact_email', models.EmailField(blank=True, max_length=254)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(
                    default=False,
                    help_text='Designates that this user has all permissions without explicitly assigning them.',
                    verbose_name='superuser status',
                )),
                ('username', models.CharField(
                    error_messages={'unique': 'A user with that username already exists.'},
                    help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.',
                    max_length=150,
                    unique=True,
                    validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                    verbose_name='username',
                )),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email address')),
                ('is_staff', models.BooleanField(
                    default=False,
                    help_text='Designates whether the user can log into this admin site.',
                    verbose_name='staff status',
                )),
                ('is_active', models.BooleanField(
                    default=True,
                    help_text='Designates whether this user should be treated as active. '
                              'Unselect this instead of deleting accounts.',
                    verbose_name='active',
                )),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('role', models.CharField(
                    choices=[
                        ('platform_admin', 'Platform Admin'),
                        ('camp_creator', 'Camp Creator'),
                        ('manager', 'Manager'),
                        ('coach', 'Coach'),
                        ('volunteer', 'Volunteer'),
                        ('parent', 'Parent / Guardian'),
                        ('athlete', 'Athlete'),
                    ],
                    default='parent',
                    max_length=20,
                )),
                ('phone_number', models.CharField(blank=True, max_length=30)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('state', models.CharField(blank=True, max_length=50)),
                ('zip_code', models.CharField(blank=True, max_length=20)),
                ('profile_photo', models.FileField(blank=True, upload_to='uploads/')),
                ('preferred_contact', models.CharField(
                    choices=[('email', 'Email'), ('sms', 'SMS'), ('app', 'In-app')],
                    default='email',
                    max_length=10,
                )),
                ('onboarding_completed', models.BooleanField(default=False)),
                ('organization', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='members',
                    to='accounts.organization',
                )),
                ('groups', models.ManyToManyField(
                    blank=True,
                    help_text='The groups this user belongs to. A user will get all permissions '
                              'granted to each of their groups.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.group',
                    verbose_name='groups',
                )),
                ('user_permissions', models.ManyToManyField(
                    blank=True,
                    help_text='Specific permissions for this user.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.permission',
                    verbose_name='user permissions',
                )),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Invitation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.EmailField(max_length=254)),
                ('role', models.CharField(
                    choices=[('manager', 'Manager'), ('coach', 'Coach'), ('volunteer', 'Volunteer')],
                    max_length=20,
                )),
                ('token', models.CharField(default=accounts.models._invitation_token, max_length=64, unique=True)),
                ('accepted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('expires_at', models.DateTimeField(default=accounts.models._invitation_expiry)),
                ('invited_by', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='invitations_sent',
                    to='accounts.user',
                )),
                ('organization', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='invitations',
                    to='accounts.organization',
                )),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Child',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=200)),
                ('date_of_birth', models.DateField()),
                ('gender', models.CharField(
                    choices=[
                        ('male', 'Male'),
                        ('female', 'Female'),
                        ('other', 'Other'),
                        ('prefer_not_to_say', 'Prefer not to say'),
                    ],
                    max_length=20,
                )),
                ('profile_photo', models.FileField(blank=True, upload_to='uploads/')),
                ('current_grade', models.CharField(blank=True, max_length=30)),
                ('school_name', models.CharField(blank=True, max_length=200)),
                ('sports_history', models.TextField(blank=True)),
                ('achievements', models.JSONField(blank=True, default=list)),
                ('emergency_contact', models.CharField(blank=True, max_length=200)),
                ('emergency_phone', models.CharField(blank=True, max_length=30)),
                ('emergency_relation', models.CharField(blank=True, max_length=50)),
                ('allergies', models.JSONField(blank=True, default=list)),
                ('medical_conditions', models.JSONField(blank=True, default=list)),
                ('medications', models.JSONField(blank=True, default=list)),
                ('special_needs', models.TextField(blank=True)),
                ('preferred_contact', models.CharField(
                    choices=[('email', 'Email'), ('sms', 'SMS'), ('app', 'In-app')],
                    default='email',
                    max_length=10,
                )),
                ('communication_opt_in', models.BooleanField(default=True)),
                ('jersey_size', models.CharField(
                    blank=True,
                    choices=[
                        ('YS', 'Youth Small'),
                        ('YM', 'Youth Medium'),
                        ('YL', 'Youth Large'),
                        ('YXL', 'Youth XL'),
                        ('AS', 'Adult Small'),
                        ('AM', 'Adult Medium'),
                        ('AL', 'Adult Large'),
                        ('AXL', 'Adult XL'),
                        ('A2XL', 'Adult 2XL'),
                    ],
                    max_length=5,
                )),
                ('shoe_size', models.CharField(blank=True, max_length=10)),
                ('height', models.CharField(blank=True, max_length=20)),
                ('weight', models.CharField(blank=True, max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('parent', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='children',
                    to='accounts.user',
                )),
            ],
            options={
                'verbose_name_plural': 'Children',
                'ordering': ['full_name'],
            },
        ),
        migrations.CreateModel(
            name='ChildSport',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('skill_level', models.CharField(
                    choices=[
                        ('beginner', 'Beginner - Just starting out'),
                        ('intermediate', 'Intermediate - Some experience'),
                        ('advanced', 'Advanced - Significant experience'),
                        ('all_levels', 'All levels'),
                    ],
                    default='beginner',
                    max_length=20,
                )),
                ('preferred_positions', models.JSONField(blank=True, default=list)),
                ('current_team', models.CharField(blank=True, max_length=200)),
                ('child', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='sports',
                    to='accounts.child',
                )),
                ('sport', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='+',
                    to='core.sport',
                )),
            ],
        ),
        migrations.AddConstraint(
            model_name='childsport',
            constraint=models.UniqueConstraint(fields=('child', 'sport'), name='unique_child_sport'),
        ),
    ]
