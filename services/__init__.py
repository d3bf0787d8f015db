"""
Service layer for business logic.

This package contains the service class that orchestrates the merge
pipeline: reading transaction files, aggregating and reporting.
"""
