"""Core del cliente BTP CLI.

Por qué:
- Dominio, configuración, errores y utilidades sin dependencias de HTTP.
"""
