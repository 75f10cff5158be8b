"""Modelos de respuesta del backend (Pydantic v2).

Por qué un paquete:
- Agrupa los esquemas por servicio del backend (cis, xsuaa, service manager...).
- Todos aceptan campos extra: el backend añade atributos sin avisar y no
  queremos perderlos al reexportar el resultado.
"""
