"""
Tests for page view construction: data fetching, metadata and error handling.
Streamlit rendering is not exercised here.
"""

from unittest.mock import patch

import pytest

from components.cms.errors import CMSFetchError
from components.cms.models import parse_record
from components.pages.cards import project_card_html
from components.pages.content_page import build_content_page_view
from components.pages.home import build_home_view
from components.pages.projects import build_projects_view
from components.pages.youth_house import build_youth_house_view, contact_rows


@pytest.fixture
def project(raw_youth_house_factory):
    return parse_record({
        "id": "p1", "slug": "music-lab", "title": "Music <Lab>", "type": "projects",
        "metadata": {
            "short_description": "Make music & friends",
            "status": {"key": "active", "value": "Active"},
            "category": {"key": "culture", "value": "Culture"},
            "youth_houses_involved": [raw_youth_house_factory("mdj", name="MDJ")],
        },
    })


class TestHomeView:

    def test_ok(self, youth_houses, site_settings):
        with patch('components.pages.home.queries') as queries:
            queries.get_youth_houses.return_value = youth_houses
            queries.get_featured_projects.return_value = []
            view = build_home_view(site_settings)

        assert view.status == "ok"
        assert view.metadata.title == "Entree Brussels"

    def test_fetch_error(self, site_settings):
        with patch('components.pages.home.queries') as queries:
            queries.get_youth_houses.side_effect = CMSFetchError("Failed to fetch youth houses")
            view = build_home_view(site_settings)

        assert view.status == "error"


class TestProjectsView:

    def test_ok(self, project):
        with patch('components.pages.projects.queries') as queries:
            queries.get_projects.return_value = [project]
            view = build_projects_view()

        assert view.status == "ok"
        assert view.metadata.title.startswith("Projects")

    def test_fetch_error(self):
        with patch('components.pages.projects.queries') as queries:
            queries.get_projects.side_effect = CMSFetchError("Failed to fetch projects")
            assert build_projects_view().status == "error"


class TestYouthHouseView:

    def test_ok(self, youth_house_factory):
        with patch('components.pages.youth_house.queries') as queries:
            queries.get_youth_house_by_slug.return_value = youth_house_factory("mdj", name="MDJ")
            view = build_youth_house_view("mdj")

        assert view.status == "ok"
        assert view.metadata.title == "MDJ | Entree Brussels"
        queries.get_youth_house_by_slug.assert_called_once_with("mdj")

    def test_not_found(self):
        with patch('components.pages.youth_house.queries') as queries:
            queries.get_youth_house_by_slug.return_value = None
            view = build_youth_house_view("missing")

        assert view.status == "not_found"
        assert view.metadata.title == "Youth House Not Found"

    def test_fetch_error(self):
        with patch('components.pages.youth_house.queries') as queries:
            queries.get_youth_house_by_slug.side_effect = CMSFetchError("Failed to fetch youth house")
            assert build_youth_house_view("mdj").status == "error"


class TestContactRows:
    """Test the contact sidebar rows of a youth house."""

    @pytest.mark.parametrize("website", ["javascript:alert(1)", "ftp://mdj.be", "www.mdj.be"])
    def test_non_http_website_is_dropped(self, youth_house_factory, website):
        rows = contact_rows(youth_house_factory(website=website))

        assert all(text != "Visit Website" for _, text, _ in rows)
        assert all(website not in (href or "") for _, _, href in rows)

    def test_http_website_is_linked(self, youth_house_factory):
        rows = contact_rows(youth_house_factory(website="https://mdj.be"))
        assert ("globe", "Visit Website", "https://mdj.be") in rows

    def test_phone_and_email_links(self, youth_house_factory):
        rows = contact_rows(youth_house_factory(phone="+32 2 123 45 67", email="info@mdj.be"))
        hrefs = [href for _, _, href in rows]
        assert "tel:+32 2 123 45 67" in hrefs
        assert "mailto:info@mdj.be" in hrefs

    def test_address_is_single_line(self, youth_house_factory):
        rows = contact_rows(youth_house_factory(address="Rue Haute 12\n1000 Bruxelles"))
        assert ("geo-alt", "Rue Haute 12, 1000 Bruxelles", None) in rows


class TestContentPageView:

    def test_not_found(self):
        with patch('components.pages.content_page.queries') as queries:
            queries.get_page_by_slug.return_value = None
            assert build_content_page_view("missing").status == "not_found"

    def test_fetch_error(self):
        with patch('components.pages.content_page.queries') as queries:
            queries.get_page_by_slug.side_effect = CMSFetchError("Failed to fetch page")
            assert build_content_page_view("about").status == "error"


class TestProjectCard:

    def test_card_is_escaped(self, project):
        card = project_card_html(project)

        assert "Music &lt;Lab&gt;" in card
        assert "Make music &amp; friends" in card
        assert "Active" in card
        assert "Culture" in card
        assert "With MDJ" in card
