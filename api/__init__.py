# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios consumida por la interfaz Streamlit.
# --------------------------------------------------------------
"""Inicializa el paquete `api` con las acciones del formulario RSA."""

__all__ = ["services"]
