"""
ReliefHub Backend — Application Package Initializer
=====================================================

What: Backend API for a donation and relief-coordination web application.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Auth + Resources)     │  ← one store call per operation
    ├─────────────────────────────────────┤
    │          Schemas (Records)          │  ← Pydantic request/response types
    ├─────────────────────────────────────┤
    │      Document Store (MongoDB)       │  ← owned client, lifespan-managed
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
