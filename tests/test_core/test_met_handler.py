"""
Tests for met_handler.py

Validate URL building and the conversion of collection API responses into candidate sets and
ArtworkRecords. requests.get is patched in every test; see test_image_handler.py for the pattern.
"""

import unittest.mock

import pytest
from requests import HTTPError
from requests.exceptions import ConnectionError

# following entities are tested in this module:
from artexposure.met_handler import get_object
from artexposure.met_handler import object_url
from artexposure.met_handler import search
from artexposure.met_handler import search_url
from artexposure.met_handler import RecordLookupError
from artexposure.met_handler import SearchError
from artexposure.models import ArtworkRecord

BASE = "https://collectionapi.metmuseum.org/public/collection/v1"


@pytest.mark.parametrize(
    ["query", "has_images", "expected"],
    [
        ("Impressionism", False, f"{BASE}/search?q=Impressionism"),
        ("Van Gogh", False, f"{BASE}/search?q=Van+Gogh"),
        ("sunflowers & irises", True, f"{BASE}/search?q=sunflowers+%26+irises&hasImages=true"),
    ],
)
def test_search_url(query, has_images, expected):
    assert search_url(query, has_images=has_images) == expected


def test_object_url():
    assert object_url(436532) == f"{BASE}/objects/436532"


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_search_success(mock_get, mock_response):

    mock_get.return_value = mock_response
    mock_response.json.return_value = {"total": 4, "objectIDs": [436532, 437984, 436532, 11417]}

    assert search("Impressionism", timeout=3) == (436532, 437984, 11417)
    mock_get.assert_called_once_with(f"{BASE}/search?q=Impressionism", timeout=3)


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_search_no_results(mock_get, mock_response):
    """The API reports no hits as "objectIDs": null."""

    mock_get.return_value = mock_response
    mock_response.json.return_value = {"total": 0, "objectIDs": None}

    assert search("zzzzzzzz") == ()


@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_search_connection_failure(mock_get):

    mock_get.side_effect = ConnectionError

    with pytest.raises(SearchError):
        search("Impressionism")


@pytest.mark.parametrize(
    "payload", [["not", "a", "dict"], {"message": "Not Found"}, {"objectIDs": ["abc"]}]
)
@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_search_unexpected_payload(mock_get, mock_response, payload):

    mock_get.return_value = mock_response
    mock_response.json.return_value = payload

    with pytest.raises(SearchError):
        search("Impressionism")


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_search_invalid_json(mock_get, mock_response):

    mock_get.return_value = mock_response
    mock_response.json.side_effect = ValueError("Expecting value")

    with pytest.raises(SearchError):
        search("Impressionism")


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_get_object_success(mock_get, mock_response):

    mock_get.return_value = mock_response
    mock_response.json.return_value = {
        "objectID": 436532,
        "title": "Wheat Field with Cypresses",
        "artistDisplayName": "Vincent van Gogh",
        "primaryImage": "https://images.metmuseum.org/CRDImages/ep/original/DT1567.jpg",
        "primaryImageSmall": "https://images.metmuseum.org/CRDImages/ep/web-large/DT1567.jpg",
    }

    record = get_object(436532)

    assert record == ArtworkRecord(
        object_id=436532,
        title="Wheat Field with Cypresses",
        artist="Vincent van Gogh",
        image_url="https://images.metmuseum.org/CRDImages/ep/original/DT1567.jpg",
    )
    assert record.is_usable


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_get_object_without_image(mock_get, mock_response):

    mock_get.return_value = mock_response
    mock_response.json.return_value = {
        "title": "Fragment of a Textile",
        "artistDisplayName": "",
        "primaryImage": "",
    }

    record = get_object(1)

    assert record.image_url == ""
    assert not record.is_usable


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_get_object_missing_field(mock_get, mock_response):

    mock_get.return_value = mock_response
    mock_response.json.return_value = {"title": "Untitled"}

    with pytest.raises(RecordLookupError):
        get_object(2)


@unittest.mock.patch("artexposure.met_handler.requests.models.Response", autospec=True)
@unittest.mock.patch("artexposure.met_handler.requests.get", autospec=True)
def test_get_object_bad_response(mock_get, mock_response):

    mock_response.raise_for_status.side_effect = HTTPError("404 Client Error")
    mock_get.return_value = mock_response

    with pytest.raises(RecordLookupError):
        get_object(3)
