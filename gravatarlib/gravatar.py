'''
Helper class to build Gravatar avatar URLs
'''
from enum import Enum
from urllib.parse import quote, urlsplit
import hashlib
import re

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

from gravatarlib.conf import get_setting, logger

MIN_SIZE = 0
MAX_SIZE = 2048  # Largest size served by Gravatar
DEFAULT_SIZE = 80
DEFAULT_RATING = 'g'

# Used as digest when no email is given
HASH_PLACEHOLDER = '0' * 32

# Whitespace trimmed from addresses before hashing, ASCII only
EMAIL_WHITESPACE = ' \t\n\r\0\x0b'

SCHEME_RE = re.compile(r'^[a-z][a-z0-9+.-]*$')

# Schemes without an authority part, they need a path instead
NO_HOST_SCHEMES = ('mailto', 'news', 'file', 'urn', 'tel', 'data')


class DefaultImage(str, Enum):
    '''
    Keywords selecting an image generated by Gravatar
    '''
    NOT_FOUND = '404'
    MYSTERY_MAN = 'mm'
    IDENTICON = 'identicon'
    MONSTERID = 'monsterid'
    WAVATAR = 'wavatar'
    RETRO = 'retro'
    BLANK = 'blank'


class Rating(str, Enum):
    '''
    Maximum rating of the images Gravatar may return
    '''
    G = 'g'
    PG = 'pg'
    R = 'r'
    X = 'x'


DEFAULT_IMAGE_KEYWORDS = frozenset(keyword.value for keyword in DefaultImage)

INVALID_DEFAULT_IMAGE = (
    'The default image specified is not a valid URL or present as default '
    'value in Gravatar.')


class InvalidConfiguration(ValueError):
    '''
    Raised when a value is not allowed for the given field
    '''
    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message


def email_digest(email):
    '''
    Return the md5 digest Gravatar uses to identify an email address
    '''
    hash_object = hashlib.new('md5')
    hash_object.update(email.strip(EMAIL_WHITESPACE).lower().encode('utf-8'))
    return hash_object.hexdigest()


def _is_url(value):
    '''
    Whether value is a syntactically valid absolute URL.

    URLValidator only knows public web hosts, so anything it rejects still
    passes with a scheme and either a host, or a path for schemes like
    mailto.
    '''
    try:
        URLValidator()(value)
        return True
    except ValidationError:
        pass

    if any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
        hostname = parts.hostname
    except ValueError:
        return False
    if not SCHEME_RE.match(parts.scheme):
        return False
    if hostname:
        return True
    return parts.scheme in NO_HOST_SCHEMES and bool(parts.path)


class Gravatar:  # pylint: disable=too-many-instance-attributes
    '''
    Hold the display options and build Gravatar URLs from them.

    Every value goes through its setter, at construction time too, so an
    instance never holds an invalid option. A rejected value leaves the
    previous one untouched.
    '''

    def __init__(  # pylint: disable=too-many-arguments
            self, size=DEFAULT_SIZE, default_image='',
            force_default_image=False, max_rating=DEFAULT_RATING,
            secure_uri=False, base_url=None, secure_base_url=None):
        self._size = DEFAULT_SIZE
        self._default_image = ''
        self._force_default_image = False
        self._max_rating = DEFAULT_RATING
        self._secure_uri = False
        self._base_url = base_url or get_setting('BASE_URL')
        self._secure_base_url = \
            secure_base_url or get_setting('SECURE_BASE_URL')

        self.set_size(size)
        self.set_default_image(default_image)
        self.set_max_rating(max_rating)
        self.set_force_default_image(force_default_image)
        self.set_secure_uri(secure_uri)

    @classmethod
    def from_settings(cls, **kwargs):
        '''
        Build an instance using the GRAVATAR_* settings as defaults
        '''
        options = {
            'size': DEFAULT_SIZE,
            'default_image': get_setting('GRAVATAR_DEFAULT_IMAGE'),
            'max_rating': get_setting('GRAVATAR_RATING'),
            'secure_uri': get_setting('GRAVATAR_SECURE'),
        }
        options.update(kwargs)
        return cls(**options)

    def __repr__(self):
        return '<Gravatar size=%i rating=%s default=%r>' % (
            self._size, self._max_rating, self._default_image)

    def get_size(self):
        '''
        Size of the avatar, in pixels
        '''
        return self._size

    def set_size(self, size):
        '''
        Set the size of the avatar, must be within MIN_SIZE and MAX_SIZE
        '''
        if not isinstance(size, int) or isinstance(size, bool) \
                or size < MIN_SIZE or size > MAX_SIZE:
            logger.info('Rejected avatar size: %r', size)
            raise InvalidConfiguration(
                'size',
                'The size must be within %i and %i' % (MIN_SIZE, MAX_SIZE))
        self._size = size

    size = property(get_size, set_size)

    def get_default_image(self):
        '''
        Encoded URL or Gravatar keyword shown when there is no avatar
        '''
        return self._default_image

    def set_default_image(self, default_image):
        '''
        Set the image shown when the address has no avatar.

        Either an absolute URL, stored lowercased and percent-encoded, one
        of the DefaultImage keywords, stored as given, or an empty string
        when no fallback is wanted.
        '''
        if not isinstance(default_image, str):
            logger.info('Rejected default image: %r', default_image)
            raise InvalidConfiguration('default_image', INVALID_DEFAULT_IMAGE)
        lowered = default_image.lower()

        if lowered and _is_url(lowered):
            self._default_image = quote(lowered, safe='')
        elif lowered in DEFAULT_IMAGE_KEYWORDS:
            self._default_image = default_image
        elif default_image == '':
            # No fallback, Gravatar shows its own default image
            self._default_image = default_image
        else:
            logger.info('Rejected default image: %r', default_image)
            raise InvalidConfiguration('default_image', INVALID_DEFAULT_IMAGE)

    default_image = property(get_default_image, set_default_image)

    def is_force_default_image(self):
        '''
        Whether the default image is shown even if an avatar exists
        '''
        return self._force_default_image

    def set_force_default_image(self, force_default_image):
        self._force_default_image = bool(force_default_image)

    force_default_image = property(
        is_force_default_image, set_force_default_image)

    def get_max_rating(self):
        return self._max_rating

    def set_max_rating(self, max_rating):
        '''
        Set the highest rating allowed, one of Rating in any case
        '''
        try:
            Rating(max_rating.lower())
        except (AttributeError, ValueError):
            logger.info('Rejected rating: %r', max_rating)
            raise InvalidConfiguration(
                'max_rating',
                'The rating specified is invalid. '
                'Use only "g", "pg", "r" or "x" value.') from None
        self._max_rating = max_rating

    max_rating = property(get_max_rating, set_max_rating)

    def is_secure_uri(self):
        '''
        Whether URLs are built on the https endpoint
        '''
        return self._secure_uri

    def set_secure_uri(self, secure_uri):
        self._secure_uri = bool(secure_uri)

    secure_uri = property(is_secure_uri, set_secure_uri)

    @property
    def base_url(self):
        return self._base_url

    @property
    def secure_base_url(self):
        return self._secure_base_url

    def build_gravatar_uri(self, email, hash_email=True):
        '''
        Build the Gravatar URL for the given email.

        With hash_email=False the email is taken as an already computed
        digest and appended as is. An empty email gives the placeholder
        digest made of 32 zeros.
        '''
        if self._secure_uri:
            uri = self._secure_base_url
        else:
            uri = self._base_url

        if hash_email and email:
            uri += email_digest(email)
        elif email:
            uri += email
        else:
            uri += HASH_PLACEHOLDER

        params = []
        params.append('s=%i' % self._size)
        params.append('r=%s' % self._max_rating)
        if self._default_image != '':
            params.append('d=%s' % self._default_image)
        if self._force_default_image:
            params.append('f=y')

        if params:
            uri += '?' + ';'.join(params)
        return uri

    def get_uri(self, email, hash_email=True):
        '''
        Shorter alias of build_gravatar_uri, handy from templates
        '''
        return self.build_gravatar_uri(email, hash_email)
