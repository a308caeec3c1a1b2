# Routes package init
"""
Servicios API — API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - roles.py:     POST/GET /api/roles, DELETE /api/roles/{id}
    - users.py:     POST/GET /api/users, DELETE /api/users/{id}
    - products.py:  POST/GET /api/productos, DELETE /api/productos/{id}
    - auth.py:      POST /api/login
    - root.py:      GET  /                 (welcome text)
    - health.py:    GET  /health           (service health check)

Routes are thin: they take the body or path parameter, call the service and
return its envelope. Errors are raised as exceptions and rendered by the
global handlers in main.py.
"""
