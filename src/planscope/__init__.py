"""
Planscope - Resource Planning Conflict Analysis

This package contains the planning conflict services:
- entities: Planning snapshots (teams, epics, projects, cycles, allocations)
- conflicts: Allocation Conflict Detection Engine (detectors, aggregation)
- api: FastAPI REST endpoints
- platform: Cross-cutting concerns (config, logging, metrics)
"""

__version__ = "0.1.0"
