"""
Pydantic schema definitions for API payloads.

Schemas are separated from the service's stored records to decouple
the API representation (which includes derived hrefs) from state.
"""
