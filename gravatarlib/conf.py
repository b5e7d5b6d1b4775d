'''
Defaults for the gravatarlib options, overridable in the Django settings
'''
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger('gravatarlib')  # pylint: disable=invalid-name

DEFAULTS = {
    'SITE_NAME': 'gravatarlib',
    'GRAVATARLIB_VERSION': '1.0',
    'BASE_URL': 'http://www.gravatar.com/avatar/',
    'SECURE_BASE_URL': 'https://www.gravatar.com/avatar/',
    'GRAVATAR_DEFAULT_IMAGE': '',
    'GRAVATAR_RATING': 'g',
    'GRAVATAR_SECURE': False,
    'MIN_LENGTH_EMAIL': 6,  # eg. x@x.xx
    'MAX_LENGTH_EMAIL': 254,  # http://stackoverflow.com/questions/386294
}


def get_setting(name):
    '''
    Value of the given setting, or its default when the project
    doesn't set it or Django isn't configured at all
    '''
    try:
        return getattr(settings, name, DEFAULTS[name])
    except ImproperlyConfigured:
        return DEFAULTS[name]
