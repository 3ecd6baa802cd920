"""Adaptadores concretos: transporte HTTP (httpx) y exportación."""
