"""
Test suite for the OrangeHRM leave-workflow automation.

This package contains:
- unit/: Fast tests for models, repositories, page drivers and the side-file
- e2e/: Playwright scenario modules run against a live OrangeHRM instance
"""
