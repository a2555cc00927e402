"""
core/models.py
──────────────
Sport – the catalogue of sports camps and children can be tagged with.
        Rows are seeded from core.constants.SPORTS so ids stay stable.
"""

from django.db import models


class Sport(models.Model):
    id = models.PositiveIntegerField(primary_key=True)
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name
