"""Page objects for browser tests."""

from allure_excel_export.testing.pages.login import LOGIN_URL, LoginPage

__all__ = ["LOGIN_URL", "LoginPage"]
