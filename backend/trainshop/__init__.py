"""Trainshop — model-train storefront backend."""
