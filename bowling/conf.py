"""Access to the ``BOWLING`` settings of the project."""
from django.conf import settings


DEFAULTS = {
    'MAX_PLAYERS': 8,
    'NAME_MAX_LENGTH': 63,
    'RANDOM_SEED': None,
    'SCOREBOARD_FORMAT': 'txt',
}


def get_setting(name):
    """Returns the configured value of ``name``, falling back to defaults."""
    return getattr(settings, 'BOWLING', {}).get(name, DEFAULTS[name])
