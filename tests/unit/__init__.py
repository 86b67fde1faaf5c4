"""
Unit test package.

These tests need neither a browser nor a network connection.  Page
drivers are exercised against ``unittest.mock`` fakes of the Playwright
page, and the leave list is replaced by canned rows.
"""
