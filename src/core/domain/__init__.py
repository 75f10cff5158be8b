"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras del protocolo de comandos: requests, responses,
  sesión y wrappers de valores opcionales.
- El dominio no conoce httpx ni la CLI: solo conceptos del protocolo.
"""
