from pathlib import Path

from decouple import config, Csv

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-me')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='*', cast=Csv())

# -----------------------------
# Apps (django-tenants split)
# -----------------------------
SHARED_APPS = [
    'django_tenants',
    'core',
    'courses',
    'pathfinder',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

TENANT_APPS = [
    'django.contrib.contenttypes',
]

INSTALLED_APPS = list(SHARED_APPS) + [app for app in TENANT_APPS if app not in SHARED_APPS]

TENANT_MODEL = 'courses.Course'
TENANT_DOMAIN_MODEL = 'courses.Domain'

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'pathfinder.middleware.PathfinderMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'core.context_processors.platform_settings',
                'pathfinder.context_processors.pathfinder',
            ],
        },
    },
]

# -----------------------------
# Database
# -----------------------------
DATABASES = {
    'default': {
        'ENGINE': 'django_tenants.postgresql_backend',
        'NAME': config('DB_NAME', default='eduka'),
        'USER': config('DB_USER', default='eduka'),
        'PASSWORD': config('DB_PASSWORD', default=''),
        'HOST': config('DB_HOST', default='localhost'),
        'PORT': config('DB_PORT', default='5432'),
    }
}

DATABASE_ROUTERS = (
    'django_tenants.routers.TenantSyncRouter',
)

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

SESSION_ENGINE = config('SESSION_ENGINE', default='django.contrib.sessions.backends.db')

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# -----------------------------
# Platform / Pathfinder
# -----------------------------
PLATFORM_NAME = config('PLATFORM_NAME', default='Eduka')
PLATFORM_SUPPORT_EMAIL = config('PLATFORM_SUPPORT_EMAIL', default=None)

# Backend: exact match against one canonical host and/or membership in a list.
PATHFINDER_MAIN_HOST = config('PATHFINDER_MAIN_HOST', default='')
PATHFINDER_MAIN_HOSTS = config('PATHFINDER_MAIN_HOSTS', default='', cast=Csv())
PATHFINDER_SESSION_COURSE_KEY = 'pathfinder:course'
PATHFINDER_SESSION_CONTEXTUALIZED_KEY = 'pathfinder:contextualized'
PATHFINDER_DOMAIN_STORE = 'pathfinder.store.ModelDomainStore'

# -----------------------------
# Logging
# -----------------------------
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'pathfinder': {
            'handlers': ['console'],
            'level': config('PATHFINDER_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}
