"""Catalog app: hiking packages and basecamps offered on Gunung Gede Pangrango."""
