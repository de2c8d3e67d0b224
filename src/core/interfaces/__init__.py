"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan adaptadores concretos.
"""
