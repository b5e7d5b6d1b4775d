'''
View classes for gravatarlib/tools/
'''
from django.views.generic.edit import FormView
from django.urls import reverse_lazy as reverse
from django.shortcuts import render

from gravatarlib.gravatar import Gravatar, email_digest
from gravatarlib.conf import logger
from .forms import CheckForm


class CheckView(FormView):
    '''
    View class for checking an e-mail address or hash
    '''
    template_name = 'check.html'
    form_class = CheckForm
    success_url = reverse('tools_check')

    def form_valid(self, form):
        gravatar = form.cleaned_data['gravatar']

        if form.cleaned_data['mail']:
            identity = form.cleaned_data['mail']
            hash_email = True
            mail_hash = email_digest(identity)
        else:
            identity = form.cleaned_data['hash']
            hash_email = False
            mail_hash = identity

        # Same options, both transports
        options = {
            'size': gravatar.size,
            'default_image': form.cleaned_data['default_image'],
            'force_default_image': gravatar.force_default_image,
            'max_rating': gravatar.max_rating,
        }
        mailurl = Gravatar(secure_uri=False, **options).get_uri(
            identity, hash_email)
        mailurl_secure = Gravatar(secure_uri=True, **options).get_uri(
            identity, hash_email)
        logger.debug('Built avatar URL %s', mailurl)

        return render(self.request, self.template_name, {
            'form': form,
            'avatar_url': gravatar.get_uri(identity, hash_email),
            'mailurl': mailurl,
            'mailurl_secure': mailurl_secure,
            'mail_hash': mail_hash,
            'size': gravatar.size,
        })
