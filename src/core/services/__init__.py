"""Servicios del Core (casos de uso)."""
