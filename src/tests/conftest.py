"""Pytest configuration for all tests."""

import os
import tempfile

import constants

# Keep config and log lookups away from the user's home directory
_TEST_DIR = tempfile.mkdtemp(prefix="fencat-tests-")
os.environ.setdefault("FENCAT_CONFIG_DIR", os.path.join(_TEST_DIR, "config"))
os.environ.setdefault("FENCAT_LOG_DIR", os.path.join(_TEST_DIR, "logs"))
constants.init_testing(_TEST_DIR)
