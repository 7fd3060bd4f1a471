#!/usr/bin/env python3
"""
Test suite for SkillScout.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the FastAPI app tests
    python -m pytest tests/ -v -m "not web"

    # Using unittest
    python -m unittest discover tests -v

No external services are needed: the job catalog API is served in memory
by tests.mocks.catalog_mocks.MockCatalog through httpx.MockTransport.
"""
