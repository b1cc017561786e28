"""Users app package.

This module holds the account side of HikeBook: the user model, the single
credential-verification service and the two independent ways of carrying
an authenticated identity (a cookie session for the HTML site and a signed
bearer token for the JSON API). Use ``apps.users.models.User`` as the
AUTH_USER_MODEL throughout the project.
"""
