# core/migrations/0002_seed_sports.py
#
# Loads the fixed sport catalogue.  Ids must match core.constants.SPORTS.
# Sport.id is a plain integer primary key (no sequence), so every insert
# supplies its id explicitly.

from django.db import migrations

from core.constants import SPORTS


def seed_sports(apps, schema_editor):
    Sport = apps.get_model('core', 'Sport')
    for sport_id, name in SPORTS:
        Sport.objects.update_or_create(id=sport_id, defaults={'name': name})


def unseed_sports(apps, schema_editor):
    Sport = apps.get_model('core', 'Sport')
    Sport.objects.filter(id__in=[sport_id for sport_id, _ in SPORTS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_sports, unseed_sports),
    ]
