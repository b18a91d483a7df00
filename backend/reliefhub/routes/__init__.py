# Routes package init
"""
ReliefHub Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles one resource; handlers stay thin and
       delegate to services built by ``reliefhub.dependencies``.

Route Inventory:
    - auth.py:        POST /api/v1/register, POST /api/v1/login
    - supplies.py:    GET /api/v1/supplies, POST/GET/PUT/DELETE /api/v1/supply[/{id}]
    - donors.py:      POST /api/v1/donor, GET /api/v1/donors
    - community.py:   POST/GET /api/v1/community
    - volunteers.py:  POST/GET /api/v1/volunteer
    - health.py:      GET /
"""
