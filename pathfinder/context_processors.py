def pathfinder(request):
    """Expose the request classification to templates as PATHFINDER."""
    finder = getattr(request, 'pathfinder', None)
    if finder is None:
        return {}
    return {
        'PATHFINDER': {
            'course': finder.course(),
            'is_frontend': finder.is_frontend(),
            'is_backend': finder.is_backend(),
            'is_external': finder.is_external(),
            'origin': finder.origin(),
        }
    }
