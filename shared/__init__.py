"""
Shared Kernel

This package contains the building blocks shared by every HikeBook app:
value objects for prices, display formatting for the Indonesian locale,
custom model fields and the JSON error contract of the API.
"""
