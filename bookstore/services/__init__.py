"""
Services Package

This package contains the business logic behind the routers. Services are:
- Separate from HTTP handling (routers)
- Easier to test in isolation (they only need a Session)

Current services:
- books.py: create/list/get/update/delete queries for books
"""
