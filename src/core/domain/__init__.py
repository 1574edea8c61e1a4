"""Modelos y tipos del dominio.

Estructuras de datos puras (Pydantic v2 / dataclasses / enums).
El dominio no conoce HTTP ni la CLI.
"""
