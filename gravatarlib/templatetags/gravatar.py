'''
Template helpers to show Gravatar avatars
'''
from django import template

from gravatarlib.gravatar import Gravatar, email_digest, HASH_PLACEHOLDER

register = template.Library()  # pylint: disable=invalid-name


@register.simple_tag
def gravatar_url(email, size=None, default=None, force_default=False,  # pylint: disable=too-many-arguments
                 rating=None, secure=None, hashed=False):
    '''
    Return the avatar URL of the given email address.

    Options left out fall back to the GRAVATAR_* settings, e.g.:
    {% gravatar_url user.email size=120 default='identicon' %}
    '''
    options = {'force_default_image': force_default}
    if size is not None:
        # Template variables often hold sizes as strings
        if isinstance(size, str) and size.isascii() and size.isdigit():
            size = int(size)
        options['size'] = size
    if default is not None:
        options['default_image'] = default
    if rating is not None:
        options['max_rating'] = rating
    if secure is not None:
        options['secure_uri'] = secure
    return Gravatar.from_settings(**options).get_uri(
        email, hash_email=not hashed)


@register.filter
def gravatar_hash(email):
    '''
    The digest identifying the email address on Gravatar
    '''
    if not email:
        return HASH_PLACEHOLDER
    return email_digest(email)
