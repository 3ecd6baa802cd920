"""Núcleo: dominio, errores, configuración, contratos y servicios."""
