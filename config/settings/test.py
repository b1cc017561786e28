"""Settings used by the test suite.

Runs against an in-memory SQLite database with a fast password hasher and
the debug routes switched off unless a test enables them explicitly.
"""

from .base import *  # noqa: F401,F403

DEBUG = False
DEBUG_ENDPOINTS = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

SIMPLE_JWT = {**SIMPLE_JWT, 'SIGNING_KEY': 'test-signing-key-with-enough-length-for-hs256'}  # noqa: F405
