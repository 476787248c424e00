import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "blog-example-insecure-key")
DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "graphene_django",
    "mongoql",
]

DATABASES = {}

ROOT_URLCONF = "blog.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    }
]

STATIC_URL = "static/"
USE_TZ = True

MONGOQL = {
    "uri": os.environ.get("MONGOQL_URI", "mongodb://localhost:27017/blog"),
    "enable_graphiql": True,
    "schema": "blog.api.api",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {"mongoql": {"handlers": ["console"], "level": "DEBUG"}},
}
