"""Servicios del Core: resolución de actividades y orquestación de comandos."""
