"""
npmhatch test suite
===================

Test Modules
------------
- test_naming.py: Tests for package name validation and normalization
- test_models.py: Tests for Pydantic models
- test_prompts.py: Tests for the questionary prompt session
- test_generator.py: Tests for copy, package.json patching, install and cleanup
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=npmhatch

    # Run specific test class
    pytest tests/test_generator.py::TestCreateProject
"""
