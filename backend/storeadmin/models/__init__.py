from storeadmin.models.store import Store
from storeadmin.models.options import Category, Color, Size
from storeadmin.models.product import Image, Product

__all__ = ["Store", "Category", "Size", "Color", "Product", "Image"]
