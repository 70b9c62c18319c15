"""
Catalog module - Cars offered for sale.
"""

from carworks.catalog.catalog import CarCatalog

__all__ = ["CarCatalog"]
