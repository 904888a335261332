from django.dispatch import Signal

# Sent by Course.register_provider() with keyword argument "course".
course_registered = Signal()
