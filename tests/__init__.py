"""Test package for Event Sponsor Assistant.

Structure:
    - unit/: State manager, client and schema tests in isolation
    - integration/: Manager and client against an in-process fake backend
    - fakes.py: Scripted endpoint and fake assistant service

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
