"""Test package for Nutrition Lens.

Structure:
    - unit/: Composer, session state, client and agent in isolation
    - integration/: API endpoint and full submission cycle

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
