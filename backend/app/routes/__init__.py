# Routes package init
"""
Sycamore Backend — API Routes Package
=======================================

Route Inventory:
    - docs.py:     GET  /api/docs                     (documentation file)
    - members.py:  GET  /api/mobile/members/test      (diagnostic sample)
                   GET  /api/mobile/members/search    (name/email search)
                   GET  /api/mobile/members/seed      (test member status)
                   POST /api/mobile/members/seed      (create test member)
    - health.py:   GET  /health                       (service health check)

Routes are thin: extract request data, call a service, return the envelope.
"""
