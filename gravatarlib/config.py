'''
Configuration overrides for settings.py
'''

import os
from gravatarlib.settings import BASE_DIR

from gravatarlib.settings import INSTALLED_APPS
from gravatarlib.settings import TEMPLATES

ALLOWED_HOSTS = ['*']

INSTALLED_APPS.extend([
    'bootstrap4',
    'gravatarlib',
    'gravatarlib.tools',
])

TEMPLATES[0]['OPTIONS']['context_processors'].append(
    'gravatarlib.context_processors.basepage',
)

SITE_NAME = os.environ.get('SITE_NAME', 'gravatarlib')
GRAVATARLIB_VERSION = '1.0'

# Endpoints of the avatar service, must end with a slash
SECURE_BASE_URL = os.environ.get(
    'SECURE_BASE_URL', 'https://www.gravatar.com/avatar/')
BASE_URL = os.environ.get('BASE_URL', 'http://www.gravatar.com/avatar/')

# Defaults used by the template tags and the check tool
GRAVATAR_DEFAULT_IMAGE = os.environ.get('GRAVATAR_DEFAULT_IMAGE', '')
GRAVATAR_RATING = os.environ.get('GRAVATAR_RATING', 'g')
GRAVATAR_SECURE = os.environ.get('GRAVATAR_SECURE', '').lower() in (
    '1', 'y', 'yes', 'true', 'on')

BOOTSTRAP4 = {
    'include_jquery': False,
    'javascript_in_head': False,
}

if os.path.isfile(os.path.join(BASE_DIR, 'config_local.py')):
    from config_local import *  # noqa # flake8: noqa # NOQA # pragma: no cover
