"""
Pages Component - one module per view of the site.

Each ``build_*_view`` fetches what its page needs and returns a PageView, so the
page metadata is known before anything is drawn.
"""

from .contact import build_contact_view, submit_contact_form
from .content_page import build_content_page_view
from .home import build_home_view
from .metadata import PageMetadata
from .projects import build_projects_view
from .view import PageView
from .youth_house import build_youth_house_view

__all__ = [
    'build_contact_view',
    'build_content_page_view',
    'build_home_view',
    'build_projects_view',
    'build_youth_house_view',
    'submit_contact_form',
    'PageMetadata',
    'PageView'
]
