"""
Service Organization
====================
**application/**
  Singleton services managed by ServiceContainer. One instance per application.
  Examples: DeviceService, EnergyMonitorService, NotificationsService

Collaborator contracts the services depend on live in ``protocols.py``.
"""
