from functools import wraps

from django.http import Http404


def _origin_required(check, message):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            pathfinder = getattr(request, 'pathfinder', None)
            if pathfinder is None or not check(pathfinder):
                raise Http404(message)
            return view_func(request, *args, **kwargs)
        return _wrapped_view
    return decorator


frontend_required = _origin_required(
    lambda p: p.is_frontend(), "No course is served from this host."
)
frontend_required.__doc__ = "Only serve the view on a course frontend host."

backend_required = _origin_required(
    lambda p: p.is_backend(), "Not the main site."
)
backend_required.__doc__ = "Only serve the view on the main backend host."
