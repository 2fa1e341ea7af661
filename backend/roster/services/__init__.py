# Services package init
"""
Roster Backend — Services Layer
=================================

What:  State and business rules, independent of HTTP.

Service Inventory:
    - UserService: In-memory user store with list/get/create/update/delete
"""
