# Routes package init
"""
Rollcall Backend — API Routes Package
=====================================

Route Inventory:
    - students.py:  GET/POST       /api/v1/student/
                    GET/PUT/DELETE /api/v1/student/{student_id}
    - health.py:    GET            /health

Routes are thin: they read the request, call StudentService and pick the
status code. Business rules live in rollcall/services.
"""
