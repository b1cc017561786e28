"""Bookings app: the session-carried booking wizard, account booking pages and the bookings API."""
