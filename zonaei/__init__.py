"""Zona Ei voice skill: entrepreneurship programs and projects by voice."""
