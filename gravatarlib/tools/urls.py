'''
gravatarlib/tools URL configuration
'''

from django.urls import path
from . views import CheckView

urlpatterns = [  # pylint: disable=invalid-name
    path('check/', CheckView.as_view(), name='tools_check'),
]
