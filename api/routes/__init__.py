"""API routes package"""

from . import recipes, saved_recipes, reviews, users, contact, admin, health

__all__ = ["recipes", "saved_recipes", "reviews", "users", "contact", "admin", "health"]
