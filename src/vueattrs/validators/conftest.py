"""
Fixtures for vue-attrs validators.
"""
from vueattrs.validators.shared_fixtures import *  # noqa: F401,F403
