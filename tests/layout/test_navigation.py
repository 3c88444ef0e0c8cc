"""
Tests for navigation entries, routing and the footer.
"""

from components.cms.models import parse_record
from components.layout.footer import social_links_html
from components.layout.navigation import (
    CONTACT,
    CONTENT_PAGE,
    HOME,
    PROJECTS,
    YOUTH_HOUSE,
    Route,
    build_nav_items,
    resolve_route,
)


def make_page(slug, title, show_in_nav=True, nav_order=None):
    return parse_record({"id": slug, "slug": slug, "title": title, "type": "pages",
                         "metadata": {"show_in_nav": show_in_nav, "nav_order": nav_order}})


class TestBuildNavItems:

    def test_fixed_items(self):
        items = build_nav_items("about-entree")

        assert [item.label for item in items] == ["Home", "Projects", "About", "Contact"]
        assert items[2].route == Route(CONTENT_PAGE, "about-entree")

    def test_cms_pages_ordered(self):
        pages = [
            make_page("faq", "FAQ", nav_order=2),
            make_page("partners", "Partners", nav_order=1),
            make_page("hidden", "Hidden", show_in_nav=False),
            make_page("misc", "Misc"),
            make_page("about-entree", "About Entree", nav_order=0),
        ]
        labels = [item.label for item in build_nav_items("about-entree", pages)]

        assert labels == ["Home", "Projects", "About", "Contact", "Partners", "FAQ", "Misc"]

    def test_duplicate_label_skipped(self):
        items = build_nav_items("about-entree", [make_page("home-2", "Home")])
        assert len(items) == 4


class TestResolveRoute:

    def setup_method(self):
        self.items = build_nav_items("about-entree")

    def test_youth_house_param(self):
        route = resolve_route({"youth_house": "mdj"}, "Projects", self.items)
        assert route == Route(YOUTH_HOUSE, "mdj")

    def test_page_param(self):
        assert resolve_route({"page": "faq"}, "Home", self.items) == Route(CONTENT_PAGE, "faq")

    def test_blank_param_ignored(self):
        assert resolve_route({"youth_house": "  "}, "Contact", self.items) == Route(CONTACT)

    def test_list_param(self):
        assert resolve_route({"youth_house": ["mdj"]}, "Home", self.items) == Route(YOUTH_HOUSE, "mdj")

    def test_current_page(self):
        assert resolve_route({}, "Projects", self.items) == Route(PROJECTS)
        assert resolve_route({}, "About", self.items) == Route(CONTENT_PAGE, "about-entree")

    def test_unknown_page_is_home(self):
        assert resolve_route({}, "Gone", self.items) == Route(HOME)
        assert resolve_route({}, None, self.items) == Route(HOME)


class TestFooter:

    def test_social_links(self, site_settings):
        links = social_links_html(site_settings)

        assert 'href="https://instagram.com/entree"' in links
        assert "facebook" not in links.lower()

    def test_no_settings(self):
        assert social_links_html(None) == ""
