import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('camps', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CampMessage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sender_name', models.CharField(max_length=200)),
                ('subject', models.CharField(max_length=255)),
                ('content', models.TextField()),
                ('sent_to_all', models.BooleanField(default=False)),
                ('email_sent', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('camp', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='messages',
                    to='camps.camp',
                )),
                ('organization', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camp_messages',
                    to='accounts.organization',
                )),
                ('sender', models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='camp_messages_sent',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='CampMessageRecipient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_read', models.BooleanField(default=False)),
                ('read_at', models.DateTimeField(blank=True, null=True)),
                ('email_delivered', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('child', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='+',
                    to='accounts.child',
                )),
                ('message', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='recipients',
                    to='communications.campmessage',
                )),
                ('parent', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='camp_message_receipts',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('registration', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='message_receipts',
                    to='camps.registration',
                )),
            ],
            options={
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('message', 'registration'), name='unique_message_recipient'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CampMessageReply',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sender_name', models.CharField(max_length=200)),
                ('content', models.TextField()),
                ('is_read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('message', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='replies',
                    to='communications.campmessage',
                )),
                ('recipient', models.ForeignKey(
                    blank=True,
                    help_text='Set when staff reply to a single parent.',
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='camp_message_replies_received',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('sender', models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='camp_message_replies',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'ordering': ['created_at'],
                'verbose_name_plural': 'Camp message replies',
            },
        ),
        migrations.CreateModel(
            name='NotificationLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('recipient_email', models.EmailField(blank=True, max_length=254)),
                ('notification_type', models.CharField(
                    choices=[
                        ('registration_confirmation', 'Registration Confirmation'),
                        ('waitlist', 'Waitlist Notice'),
                        ('slot_booking', 'Slot Booking Confirmation'),
                        ('slot_cancellation', 'Slot Cancellation'),
                        ('camp_update', 'Camp Update'),
                        ('camp_message', 'Camp Message'),
                        ('invitation', 'Staff Invitation'),
                        ('custom', 'Custom Message'),
                    ],
                    default='custom',
                    max_length=30,
                )),
                ('channel', models.CharField(
                    choices=[('email', 'Email'), ('sms', 'SMS')],
                    default='email',
                    max_length=10,
                )),
                ('subject', models.CharField(blank=True, help_text='Email subject line or SMS header.', max_length=255)),
                ('body_preview', models.TextField(
                    blank=True,
                    help_text='First 500 characters of the message body (for the audit log).',
                )),
                ('sent_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('success', models.BooleanField(
                    default=True,
                    help_text='False if the send attempt failed (e.g. bounce, SMTP error).',
                )),
                ('error_message', models.TextField(blank=True, help_text='Error details if success=False.')),
                ('camp', models.ForeignKey(
                    blank=True,
                    help_text='The camp this notification is about (if applicable).',
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='notifications',
                    to='camps.camp',
                )),
                ('organization', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='notifications',
                    to='accounts.organization',
                )),
                ('recipient', models.ForeignKey(
                    blank=True,
                    help_text='The user who received this notification (empty for invitations).',
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='notifications_received',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Notification Log',
                'verbose_name_plural': 'Notification Logs',
                'ordering': ['-sent_at'],
            },
        ),
    ]
