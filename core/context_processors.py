from django.conf import settings


def platform_settings(request):
    return {
        'PLATFORM': {
            'NAME': getattr(settings, 'PLATFORM_NAME', 'Eduka'),
            'MAIN_HOST': getattr(settings, 'PATHFINDER_MAIN_HOST', ''),
            'SUPPORT_EMAIL': getattr(settings, 'PLATFORM_SUPPORT_EMAIL', None),
        }
    }
