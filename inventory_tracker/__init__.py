"""Inventory Tracker: authenticated inventory CRUD API and its client view."""
