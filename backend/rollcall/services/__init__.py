# Services package init
"""
Rollcall Backend — Services Layer
=================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services accept validated schemas and a session, apply the rules,
       and return response schemas or raise application exceptions.

Service Inventory:
    - StudentService: CRUD on students with existence and email-uniqueness checks
"""
