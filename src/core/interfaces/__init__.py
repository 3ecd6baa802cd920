"""Contratos del Core.

Aquí solo vive `RedirectResolver`: el servicio de chequeo depende de él y
el adaptador httpx lo implementa.
"""
