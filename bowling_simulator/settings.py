"""Django settings for the bowling simulator.

The simulator keeps every match in memory for the lifetime of the process,
so no database is configured.
"""
import os


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'bowling-simulator-insecure-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '') == '1'

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'rest_framework',
    'bowling',
]

DATABASES = {}

USE_TZ = True

LANGUAGE_CODE = 'en-us'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'bowling.renderers.ScoreboardTextRenderer',
        'rest_framework.renderers.JSONRenderer',
    ],
}

BOWLING = {
    'MAX_PLAYERS': 8,
    'NAME_MAX_LENGTH': 63,
    'RANDOM_SEED': (int(os.environ['BOWLING_RANDOM_SEED'])
                    if os.environ.get('BOWLING_RANDOM_SEED') else None),
    'SCOREBOARD_FORMAT': 'txt',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(module)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('BOWLING_LOG_LEVEL', 'WARNING'),
    },
}
