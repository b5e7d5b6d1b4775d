'''
Default: useful variables for the base page templates.
'''

from gravatarlib.conf import get_setting
from gravatarlib.gravatar import DEFAULT_SIZE


def basepage(request):
    '''
    Our contextprocessor adds additional context variables
    in order to be used in the templates
    '''
    context = {}
    context['gravatarlib_version'] = get_setting('GRAVATARLIB_VERSION')
    context['site_name'] = get_setting('SITE_NAME')
    context['site_url'] = request.build_absolute_uri('/')[:-1]
    context['default_avatar_size'] = DEFAULT_SIZE
    context['BASE_URL'] = get_setting('BASE_URL')
    context['SECURE_BASE_URL'] = get_setting('SECURE_BASE_URL')
    return context
