"""
vue-attrs: attribute resolution for Vue components across mixins and extends.
"""

__version__ = "0.3.0"
