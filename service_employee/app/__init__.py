"""
Employee API service package.

Fronts the upstream employee server with a REST API and an in-process
cache so repeated reads do not hit the server.

Structure:
- app.main: FastAPI app and routes.
- app.adapters: HTTP client and wire models for the employee server.
- app.caching: Cache regions and the read-through caching client.
- app.domain: Employee models, list operations and the service façade.
"""
