"""Development settings for HikeBook.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and exposing
the debug routes. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Session/auth inspection routes are handy while developing
DEBUG_ENDPOINTS = get_bool_env('DEBUG_ENDPOINTS', True)  # noqa: F405

# Serve uncompressed static files without a manifest
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

# Use console email backend during development
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
