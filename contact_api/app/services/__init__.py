"""
Service layer abstraction.

Each service encapsulates business logic for a domain and delegates
storage to the component it was constructed with, so API handlers
never talk to storage directly.
"""
