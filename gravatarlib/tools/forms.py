'''
Classes for our gravatarlib.tools.forms
'''
from django import forms
from django.utils.translation import gettext_lazy as _
from django.core.exceptions import ValidationError

from gravatarlib.conf import get_setting
from gravatarlib.gravatar import Gravatar, InvalidConfiguration
from gravatarlib.gravatar import Rating, MIN_SIZE, MAX_SIZE, DEFAULT_SIZE

# Map Gravatar option names to the form fields holding them
FIELD_NAMES = {
    'size': 'size',
    'default_image': 'default_image',
    'max_rating': 'rating',
}


class CheckForm(forms.Form):
    '''
    Form handling check
    '''
    mail = forms.EmailField(
        label=_('E-Mail'),
        required=False,
        min_length=get_setting('MIN_LENGTH_EMAIL'),
        max_length=get_setting('MAX_LENGTH_EMAIL'),
    )

    hash = forms.CharField(
        label=_('Hash'),
        required=False,
        max_length=64,
        help_text=_('Already hashed address, used as is'),
    )

    size = forms.IntegerField(
        label=_('Size'),
        initial=DEFAULT_SIZE,
        min_value=MIN_SIZE,
        max_value=MAX_SIZE,
        required=True,
    )

    default_image = forms.CharField(
        label=_('Default image'),
        required=False,
        help_text=_('URL or one of 404, mm, identicon, monsterid, wavatar, '
                    'retro, blank'),
    )

    force_default = forms.BooleanField(
        label=_('Force default image'),
        required=False,
    )

    rating = forms.ChoiceField(
        label=_('Rating'),
        choices=[(rating.value, rating.value.upper()) for rating in Rating],
        initial=get_setting('GRAVATAR_RATING'),
        required=True,
    )

    secure = forms.BooleanField(
        label=_('Use https'),
        required=False,
    )

    def clean(self):
        self.cleaned_data = super().clean()
        mail = self.cleaned_data.get('mail')
        hash_value = self.cleaned_data.get('hash')
        if not mail and not hash_value:
            raise ValidationError(_('Either mail or hash must be specified'))

        if self.errors:
            return self.cleaned_data

        try:
            self.cleaned_data['gravatar'] = Gravatar(
                size=self.cleaned_data['size'],
                default_image=self.cleaned_data.get('default_image', ''),
                force_default_image=self.cleaned_data.get('force_default'),
                max_rating=self.cleaned_data['rating'],
                secure_uri=self.cleaned_data.get('secure'))
        except InvalidConfiguration as exc:
            self.add_error(FIELD_NAMES.get(exc.field), exc.message)
        return self.cleaned_data
