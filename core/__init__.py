"""
Core processing modules for transaction merging.

This package contains:
- aggregate: Summary statistics
- config: Application configuration and settings
- exceptions: Custom exception classes
- ingestion: Reading transaction files
- logger: Logging configuration and the two-channel event log
- parsing: Transaction line parsing
- reporting: Summary reporting and currency formatting
- schema: Pydantic models for transactions and parse results
"""
