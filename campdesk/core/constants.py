"""
core/constants.py
─────────────────
Enumerations shared by every app: sports, skill levels, jersey sizes,
roles, contact preferences and the document / signature vocabularies.

Models import the TextChoices classes from here so the same values are used
in the database, the forms and the /api/constants endpoint.
"""

from django.db import models


UNKNOWN_SPORT = 'Unknown Sport'

# Stable ids: existing camps and children reference sports by these numbers.
SPORTS = [
    (11, 'Archery'),
    (12, 'Badminton'),
    (3, 'Baseball'),
    (1, 'Basketball'),
    (13, 'Biathlon'),
    (14, 'Billiards'),
    (15, 'Bobsleigh'),
    (16, 'Bodybuilding'),
    (17, 'Bowling'),
    (18, 'Boxing'),
    (19, 'Canoeing'),
    (20, 'Cheerleading'),
    (21, 'Chess'),
    (22, 'Climbing'),
    (23, 'Cricket'),
    (24, 'CrossFit'),
    (25, 'Curling'),
    (26, 'Cycling'),
    (27, 'Darts'),
    (28, 'Equestrian'),
    (29, 'Fencing'),
    (30, 'Field Hockey'),
    (31, 'Figure Skating'),
    (32, 'Fishing'),
    (6, 'Football'),
    (33, 'Football (American)'),
    (34, 'Frisbee (Ultimate)'),
    (9, 'Golf'),
    (35, 'Gymnastics'),
    (36, 'Handball'),
    (10, 'Hockey'),
    (37, 'Hockey (Ice)'),
    (38, 'Hockey (Roller)'),
    (39, 'Judo'),
    (40, 'Karate'),
    (41, 'Kayaking'),
    (42, 'Kickboxing'),
    (43, 'Lacrosse'),
    (44, 'Mixed Martial Arts (MMA)'),
    (45, 'Motocross'),
    (46, 'Netball'),
    (47, 'Paddleboarding'),
    (48, 'Paintball'),
    (49, 'Parkour'),
    (50, 'Pickleball'),
    (51, 'Powerlifting'),
    (52, 'Racquetball'),
    (53, 'Rock Climbing'),
    (54, 'Rowing'),
    (55, 'Rugby'),
    (56, 'Running'),
    (57, 'Sailing'),
    (58, 'Skateboarding'),
    (59, 'Skiing'),
    (60, 'Snowboarding'),
    (2, 'Soccer'),
    (61, 'Softball'),
    (62, 'Speed Skating'),
    (63, 'Squash'),
    (64, 'Surfing'),
    (5, 'Swimming'),
    (65, 'Table Tennis'),
    (66, 'Taekwondo'),
    (4, 'Tennis'),
    (8, 'Track and Field'),
    (67, 'Triathlon'),
    (7, 'Volleyball'),
    (68, 'Water Polo'),
    (69, 'Weightlifting'),
    (70, 'Wrestling'),
    (71, 'Yoga'),
    (72, 'Zumba'),
]

SPORTS_BY_ID = dict(SPORTS)
SPORTS_BY_NAME = {name: sport_id for sport_id, name in SPORTS}


def get_sport_name(sport_id):
    """Return the display name for *sport_id*, or 'Unknown Sport'."""
    try:
        return SPORTS_BY_ID.get(int(sport_id), UNKNOWN_SPORT)
    except (TypeError, ValueError):
        return UNKNOWN_SPORT


def get_sport_id(name):
    return SPORTS_BY_NAME.get(name)


# ── People ────────────────────────────────────────────────────────────────────

class Role(models.TextChoices):
    PLATFORM_ADMIN = 'platform_admin', 'Platform Admin'
    CAMP_CREATOR   = 'camp_creator',   'Camp Creator'
    MANAGER        = 'manager',        'Manager'
    COACH          = 'coach',          'Coach'
    VOLUNTEER      = 'volunteer',      'Volunteer'
    PARENT         = 'parent',         'Parent / Guardian'
    ATHLETE        = 'athlete',        'Athlete'


# Roles that belong to an organization and see its camps.
ORGANIZATION_STAFF_ROLES = (
    Role.CAMP_CREATOR,
    Role.MANAGER,
    Role.COACH,
    Role.VOLUNTEER,
)

# Roles allowed to create and edit camps, fields and slots.
ORGANIZATION_MANAGER_ROLES = (
    Role.CAMP_CREATOR,
    Role.MANAGER,
)

# Roles a new account may pick when signing up.
SELF_SERVICE_ROLES = (
    Role.CAMP_CREATOR,
    Role.PARENT,
    Role.ATHLETE,
)


class StaffRole(models.TextChoices):
    MANAGER   = 'manager',   'Manager'
    COACH     = 'coach',     'Coach'
    VOLUNTEER = 'volunteer', 'Volunteer'


class Gender(models.TextChoices):
    MALE              = 'male',              'Male'
    FEMALE            = 'female',            'Female'
    OTHER             = 'other',             'Other'
    PREFER_NOT_TO_SAY = 'prefer_not_to_say', 'Prefer not to say'


class ContactMethod(models.TextChoices):
    EMAIL = 'email', 'Email'
    SMS   = 'sms',   'SMS'
    APP   = 'app',   'In-app'


class JerseySize(models.TextChoices):
    YS   = 'YS',   'Youth Small'
    YM   = 'YM',   'Youth Medium'
    YL   = 'YL',   'Youth Large'
    YXL  = 'YXL',  'Youth XL'
    AS   = 'AS',   'Adult Small'
    AM   = 'AM',   'Adult Medium'
    AL   = 'AL',   'Adult Large'
    AXL  = 'AXL',  'Adult XL'
    A2XL = 'A2XL', 'Adult 2XL'


# ── Sports ────────────────────────────────────────────────────────────────────

class SkillLevel(models.TextChoices):
    BEGINNER     = 'beginner',     'Beginner - Just starting out'
    INTERMEDIATE = 'intermediate', 'Intermediate - Some experience'
    ADVANCED     = 'advanced',     'Advanced - Significant experience'
    ALL_LEVELS   = 'all_levels',   'All levels'


# ── Documents & signatures ────────────────────────────────────────────────────

class DocumentType(models.TextChoices):
    WAIVER    = 'waiver',    'Waiver'
    AGREEMENT = 'agreement', 'Agreement'
    CONSENT   = 'consent',   'Consent'
    POLICY    = 'policy',    'Policy'
    CUSTOM    = 'custom',    'Custom'


class DocumentStatus(models.TextChoices):
    DRAFT    = 'draft',    'Draft'
    ACTIVE   = 'active',   'Active'
    INACTIVE = 'inactive', 'Inactive'
    ARCHIVED = 'archived', 'Archived'


class SignatureStatus(models.TextChoices):
    PENDING  = 'pending',  'Pending'
    SIGNED   = 'signed',   'Signed'
    EXPIRED  = 'expired',  'Expired'
    DECLINED = 'declined', 'Declined'
    REVOKED  = 'revoked',  'Revoked'


class SignatureFieldType(models.TextChoices):
    SIGNATURE = 'signature', 'Signature'
    INITIAL   = 'initial',   'Initial'
    DATE      = 'date',      'Date'
    TEXT      = 'text',      'Text'
    CHECKBOX  = 'checkbox',  'Checkbox'


class AuditAction(models.TextChoices):
    CREATED  = 'created',  'Created'
    VIEWED   = 'viewed',   'Viewed'
    SIGNED   = 'signed',   'Signed'
    SENT     = 'sent',     'Sent'
    MODIFIED = 'modified', 'Modified'
    EXPIRED  = 'expired',  'Expired'
    DECLINED = 'declined', 'Declined'
    REVOKED  = 'revoked',  'Revoked'


def choices_payload(choices_class):
    """[{value, label}, …] for a TextChoices class."""
    return [{'value': value, 'label': label} for value, label in choices_class.choices]


def constants_payload():
    """Everything a client needs to render pickers, keyed by name."""
    return {
        'sports':              [{'id': sport_id, 'name': name} for sport_id, name in SPORTS],
        'skill_levels':        choices_payload(SkillLevel),
        'jersey_sizes':        choices_payload(JerseySize),
        'genders':             choices_payload(Gender),
        'contact_methods':     choices_payload(ContactMethod),
        'roles':               choices_payload(Role),
        'staff_roles':         choices_payload(StaffRole),
        'document_types':      choices_payload(DocumentType),
        'document_statuses':   choices_payload(DocumentStatus),
        'signature_statuses':  choices_payload(SignatureStatus),
        'signature_field_types': choices_payload(SignatureFieldType),
        'audit_actions':       choices_payload(AuditAction),
    }
