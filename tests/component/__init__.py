"""
Component tests for the Product Store API

Component tests drive the HTTP endpoints through FastAPI's TestClient with
real service and store instances, checking end-to-end behaviour.
"""
