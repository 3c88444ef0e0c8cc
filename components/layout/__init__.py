"""
Layout Component - sidebar navigation, routing and footer.
"""

from .footer import render_footer
from .navigation import NavItem, Route, build_nav_items, render_navigation, resolve_route

__all__ = [
    'render_footer',
    'NavItem',
    'Route',
    'build_nav_items',
    'render_navigation',
    'resolve_route'
]
