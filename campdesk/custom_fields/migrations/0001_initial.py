import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('camps', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CustomField',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Internal key, e.g. "tshirt_color".', max_length=100)),
                ('label', models.CharField(help_text='Question shown to parents.', max_length=200)),
                ('description', models.TextField(blank=True)),
                ('field_type', models.CharField(
                    choices=[
                        ('short_text', 'Short text'),
                        ('long_text', 'Long text'),
                        ('dropdown', 'Dropdown'),
                        ('single_select', 'Single select'),
                        ('multi_select', 'Multi select'),
                    ],
                    max_length=20,
                )),
                ('required', models.BooleanField(default=False)),
                ('validation_type', models.CharField(
                    choices=[
                        ('none', 'None'),
                        ('required', 'Required'),
                        ('email', 'Email'),
                        ('phone', 'Phone'),
                        ('number', 'Number'),
                        ('date', 'Date'),
                    ],
                    default='none',
                    max_length=10,
                )),
                ('options', models.JSONField(blank=True, default=list, help_text='Choices for select fields.')),
                ('field_source', models.CharField(
                    choices=[('registration', 'Registration form'), ('camp', 'Camp attribute')],
                    default='registration',
                    max_length=20,
                )),
                ('is_internal', models.BooleanField(
                    default=False,
                    help_text='Internal fields are only visible to organization staff.',
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='custom_fields',
                    to='accounts.organization',
                )),
            ],
            options={
                'ordering': ['name'],
                'constraints': [
                    models.UniqueConstraint(fields=('organization', 'name'), name='unique_field_name_per_org'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CampCustomField',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order', models.PositiveIntegerField(default=0)),
                ('required', models.BooleanField(
                    blank=True,
                    help_text='Overrides the field default for this camp when set.',
                    null=True,
                )),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='custom_fields',
                    to='camps.camp',
                )),
                ('custom_field', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camp_links',
                    to='custom_fields.customfield',
                )),
            ],
            options={
                'ordering': ['order', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('camp', 'custom_field'), name='unique_camp_custom_field'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CustomFieldResponse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('response', models.TextField(blank=True)),
                ('response_array', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('custom_field', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='responses',
                    to='custom_fields.customfield',
                )),
                ('registration', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='custom_field_responses',
                    to='camps.registration',
                )),
            ],
            options={
                'constraints': [
                    models.UniqueConstraint(fields=('registration', 'custom_field'), name='unique_field_response'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CampMetaField',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('response', models.TextField(blank=True)),
                ('response_array', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='meta_fields',
                    to='camps.camp',
                )),
                ('custom_field', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camp_values',
                    to='custom_fields.customfield',
                )),
            ],
            options={
                'ordering': ['custom_field__name'],
                'constraints': [
                    models.UniqueConstraint(fields=('camp', 'custom_field'), name='unique_camp_meta_field'),
                ],
            },
        ),
    ]
