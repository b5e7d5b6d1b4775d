'''
gravatarlib URL configuration
'''
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [  # pylint: disable=invalid-name
    path('tools/', include('gravatarlib.tools.urls')),
    path('', RedirectView.as_view(pattern_name='tools_check'), name='home'),
]
