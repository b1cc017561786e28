"""Top-level package for Django configuration.

This package holds the HikeBook project configuration: settings modules for
the different environments, the root URL configuration and the WSGI/ASGI
entry points.
"""
