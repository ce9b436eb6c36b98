"""
Service layer.

Each service encapsulates the business rules for one domain and
returns ``Outcome`` values instead of raising, so API handlers only
translate outcomes into responses.
"""
