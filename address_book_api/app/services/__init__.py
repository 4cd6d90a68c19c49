"""
Service layer abstraction.

Services encapsulate the state and rules of a domain so that API
handlers only translate between HTTP and service calls.
"""
