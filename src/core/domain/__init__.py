"""Modelos y entidades del dominio.

- Estructuras de datos puras e inmutables (Pydantic v2 / dataclasses).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
