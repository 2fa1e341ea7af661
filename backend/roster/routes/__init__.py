# Routes package init
"""
Roster Backend — API Routes Package
=====================================

Route Inventory:
    - users.py:   GET    /users           (list users)
                  GET    /users/{id}      (get one user)
                  POST   /users           (create user)
                  PATCH  /users/{id}      (partial update)
                  DELETE /users/{id}      (delete user)
    - health.py:  GET    /                (greeting)
                  GET    /health          (service health check)

Routes are thin: validate input, call UserService, shape the response.
"""
