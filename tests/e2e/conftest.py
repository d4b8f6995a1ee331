"""Fixtures for browser tests using Playwright."""

from collections.abc import AsyncGenerator

import pytest
from playwright.async_api import Page, async_playwright


@pytest.fixture
async def page() -> AsyncGenerator[Page, None]:
    """Launch headless Chromium and yield a fresh page."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch()
        context = await browser.new_context()
        try:
            yield await context.new_page()
        finally:
            await context.close()
            await browser.close()
