"""
Tests for the page-level CMS queries.
"""

from unittest.mock import Mock, patch

import pytest

from components.cms import queries
from components.cms.errors import CMSFetchError, CMSNotFoundError
from components.cms.models import LocationRecord, PageRecord, SiteConfigRecord


@pytest.fixture
def client():
    return Mock()


class TestCollectionQueries:
    """Test list queries."""

    def test_get_youth_houses(self, client, raw_youth_house_factory):
        client.find.return_value = [raw_youth_house_factory("a"), raw_youth_house_factory("b")]

        houses = queries.get_youth_houses(client=client)

        assert [h.slug for h in houses] == ["a", "b"]
        assert all(isinstance(h, LocationRecord) for h in houses)
        client.find.assert_called_once_with("youth-houses", query=None)

    def test_not_found_is_empty_list(self, client):
        client.find.side_effect = CMSNotFoundError("No objects found", status=404)
        assert queries.get_youth_houses(client=client) == []

    def test_fetch_failure_is_raised(self, client, caplog):
        client.find.side_effect = CMSFetchError("Cosmic returned HTTP 500", status=500)

        with pytest.raises(CMSFetchError) as excinfo:
            queries.get_projects(client=client)

        assert "projects" in str(excinfo.value)
        assert "Error fetching projects" in caplog.text

    def test_invalid_objects_are_skipped(self, client, raw_youth_house_factory):
        client.find.return_value = [{"id": "broken"}, raw_youth_house_factory("ok")]
        assert [h.slug for h in queries.get_youth_houses(client=client)] == ["ok"]

    def test_object_with_list_metadata_is_skipped(self, client, raw_youth_house_factory):
        broken = raw_youth_house_factory("broken")
        broken["metadata"] = ["not", "an", "object"]
        client.find.return_value = [broken, raw_youth_house_factory("ok")]

        assert [h.slug for h in queries.get_youth_houses(client=client)] == ["ok"]

    def test_featured_projects_query(self, client):
        client.find.return_value = []
        queries.get_featured_projects(client=client)
        client.find.assert_called_once_with("projects", query={"metadata.featured_homepage": True})

    def test_type_is_taken_from_query(self, client):
        client.find.return_value = [{"id": "1", "slug": "about", "title": "About", "metadata": {}}]
        pages = queries.get_pages(client=client)
        assert isinstance(pages[0], PageRecord)


class TestSingleObjectQueries:
    """Test by-slug and singleton queries."""

    def test_get_youth_house_by_slug(self, client, raw_youth_house_factory):
        client.find_one.return_value = raw_youth_house_factory("mdj")

        house = queries.get_youth_house_by_slug("mdj", client=client)

        assert house.slug == "mdj"
        client.find_one.assert_called_once_with("youth-houses", slug="mdj")

    def test_not_found_is_none(self, client):
        client.find_one.side_effect = CMSNotFoundError("No objects found", status=404)
        assert queries.get_page_by_slug("missing", client=client) is None

    def test_empty_result_is_none(self, client):
        client.find_one.return_value = None
        assert queries.get_project_by_slug("missing", client=client) is None

    def test_fetch_failure_is_raised(self, client):
        client.find_one.side_effect = CMSFetchError("Request failed")
        with pytest.raises(CMSFetchError):
            queries.get_youth_house_by_slug("mdj", client=client)

    def test_invalid_object_is_fetch_error(self, client):
        client.find_one.return_value = {"id": "no-slug"}
        with pytest.raises(CMSFetchError):
            queries.get_page_by_slug("about", client=client)

    def test_object_with_string_metadata_is_fetch_error(self, client):
        client.find_one.return_value = {"id": "1", "slug": "mdj", "metadata": "oops"}
        with pytest.raises(CMSFetchError):
            queries.get_youth_house_by_slug("mdj", client=client)

    def test_site_settings(self, client):
        client.find_one.return_value = {"id": "s", "slug": "site-settings", "metadata": {"site_title": "Entree"}}

        settings = queries.get_site_settings(client=client)

        assert isinstance(settings, SiteConfigRecord)
        assert settings.site_title == "Entree"
        client.find_one.assert_called_once_with("site-settings", slug=None)


class TestRecordTypeCheck:
    """Test that a parsed record must match the queried model."""

    def test_mismatched_model_raises_fetch_error(self):
        raw = {"id": "1", "slug": "about", "title": "About", "metadata": {}}
        with pytest.raises(CMSFetchError) as excinfo:
            queries._parse(raw, "pages", LocationRecord)

        assert "LocationRecord" in str(excinfo.value)
        assert "PageRecord" in str(excinfo.value)

    def test_matching_model_is_returned(self):
        raw = {"id": "1", "slug": "about", "title": "About", "metadata": {}}
        assert isinstance(queries._parse(raw, "pages", PageRecord), PageRecord)


class TestSharedClient:
    """Test the module-level client."""

    def teardown_method(self):
        queries.set_client(None)

    def test_set_client_is_used_by_default(self, client):
        client.find.return_value = []
        queries.set_client(client)

        queries.get_pages()
        client.find.assert_called_once()

    def test_client_built_from_settings(self, monkeypatch):
        monkeypatch.setenv("COSMIC_BUCKET_SLUG", "entree")
        monkeypatch.setenv("COSMIC_READ_KEY", "key")
        queries.set_client(None)

        with patch('components.cms.queries.CosmicClient') as client_cls:
            queries.get_client()

        assert client_cls.call_args.kwargs['bucket_slug'] == "entree"
        assert client_cls.call_args.kwargs['read_key'] == "key"
