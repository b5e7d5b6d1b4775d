'''
Test our views in gravatarlib.tools.views
'''
import os
import django
from django.test import SimpleTestCase
from django.test import Client
from django.urls import reverse

os.environ['DJANGO_SETTINGS_MODULE'] = 'gravatarlib.settings'
django.setup()

# pylint: disable=wrong-import-position
from gravatarlib.tools.forms import CheckForm
# pylint: enable=wrong-import-position

MAIL = 'nic.gille@gmail.com'
MAIL_HASH = 'ceaac5a38484c84251076c359cbf2ab2'


class Tester(SimpleTestCase):
    '''
    Main test class
    '''
    client = Client()

    def test_home_redirects_to_check(self):
        """
        The root URL leads to the check tool
        """
        response = self.client.get('/')
        self.assertRedirects(
            response, reverse('tools_check'), fetch_redirect_response=False)

    def test_check_form(self):
        """
        Show the empty check form
        """
        response = self.client.get(reverse('tools_check'))
        self.assertEqual(response.status_code, 200, 'no 200 ok?')
        self.assertContains(response, 'name="mail"')
        self.assertNotContains(response, 'id="mailurl"')

    def test_check_mail(self):
        """
        Check an e-mail address
        """
        response = self.client.post(
            reverse('tools_check'), {
                'mail': MAIL,
                'size': 120,
                'default_image': 'identicon',
                'rating': 'pg',
            },
        )
        self.assertEqual(response.status_code, 200, 'no 200 ok?')
        self.assertContains(
            response,
            'http://www.gravatar.com/avatar/%s?s=120;r=pg;d=identicon' %
            MAIL_HASH)
        self.assertContains(
            response,
            'https://www.gravatar.com/avatar/%s?s=120;r=pg;d=identicon' %
            MAIL_HASH)
        self.assertContains(response, MAIL_HASH)

    def test_check_hash(self):
        """
        Check an already hashed address
        """
        response = self.client.post(
            reverse('tools_check'), {
                'hash': MAIL_HASH,
                'size': 80,
                'rating': 'g',
                'force_default': 'on',
            },
        )
        self.assertEqual(response.status_code, 200, 'no 200 ok?')
        self.assertContains(
            response,
            'http://www.gravatar.com/avatar/%s?s=80;r=g;f=y' % MAIL_HASH)

    def test_check_without_mail_or_hash(self):
        """
        Something to check is required
        """
        form = CheckForm(data={'size': 80, 'rating': 'g'})
        self.assertFalse(form.is_valid())
        self.assertEqual(
            form.non_field_errors(), ['Either mail or hash must be specified'])

    def test_check_invalid_default_image(self):
        """
        Invalid default image is reported on its field
        """
        form = CheckForm(data={
            'mail': MAIL,
            'size': 80,
            'rating': 'g',
            'default_image': '403',
        })
        self.assertFalse(form.is_valid())
        self.assertIn('default_image', form.errors)
        self.assertNotIn('gravatar', form.cleaned_data)

    def test_check_size_out_of_range(self):
        """
        Size is limited to the range Gravatar serves
        """
        form = CheckForm(data={'mail': MAIL, 'size': 2049, 'rating': 'g'})
        self.assertFalse(form.is_valid())
        self.assertIn('size', form.errors)

    def test_check_form_builds_gravatar(self):
        """
        A valid form carries the configured builder
        """
        form = CheckForm(data={
            'mail': MAIL,
            'size': 0,
            'rating': 'x',
            'secure': 'on',
        })
        self.assertTrue(form.is_valid(), form.errors)
        gravatar = form.cleaned_data['gravatar']
        self.assertEqual(gravatar.size, 0)
        self.assertTrue(gravatar.secure_uri)
        self.assertEqual(
            gravatar.get_uri(MAIL),
            'https://www.gravatar.com/avatar/%s?s=0;r=x' % MAIL_HASH)
