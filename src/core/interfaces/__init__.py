"""Contratos del Core (Protocol).

Los adaptadores concretos (HTTP) los implementan; la CLI y los servicios
dependen solo de estos contratos.
"""
