# Services package init
"""
Sycamore Backend — Services Package
=====================================

Business logic, independent of HTTP:
    - documentation_service.py: reads the documentation file (aiofiles)
    - member_service.py:        member sample, search and test-member seed
"""
