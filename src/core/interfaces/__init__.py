"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Las fachadas dependen del contrato de ejecución, no del cliente HTTP.
"""
