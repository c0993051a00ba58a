"""
Met Collection API - URL Builder and Client

This module is a wrapper around the Metropolitan Museum of Art public collection API
(unauthenticated, GET only). The URL builders assemble well-formed endpoints and the two
client functions turn responses into art-exposure types:

    search(query)         -> tuple of object ids (the candidate set)
    get_object(object_id) -> ArtworkRecord

API docs: https://metmuseum.github.io/

Failures are typed by how the caller should react. A failed search ends the run
(SearchError), while a failed object lookup is a RecordLookupError that the selector
retries with another candidate.
"""

from functools import wraps
from urllib.parse import urlencode

import requests

from artexposure.config import config
from artexposure.errors import FatalError
from artexposure.errors import RetryableError
from artexposure.models import ArtworkRecord


class SearchError(FatalError):
    """
    Raised when the search request fails or returns something that isn't a search result.
    """

    pass


class RecordLookupError(RetryableError):
    """
    Raised when a single object can't be fetched or decoded.
    """

    pass


def base_url(func):
    """
    Use this decorator to inject the base url into each url builder. That way should the url change in the future
    it can be done in one place.
    """

    base_url = "https://collectionapi.metmuseum.org/public/collection/v1"

    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(base_url=base_url, *args, **kwargs)

    return wrapper


def url_path(url_path: str):
    """
    Use this decorator to inject the correct path component for the intended endpoint.
    """

    def wrapper(func):
        @wraps(func)
        def inner(*args, **kwargs):
            return func(url_path=url_path, *args, **kwargs)

        return inner

    return wrapper


def make_met_url(path_components: list, query: str = "") -> str:
    url = "/".join(str(component) for component in path_components)
    return f"{url}?{query}" if query else url


@base_url
@url_path("search")
def search_url(query: str, has_images: bool = False, *args, **kwargs) -> str:
    """
    Build the search endpoint for a free text query, e.g.
    https://collectionapi.metmuseum.org/public/collection/v1/search?q=Impressionism
    """

    params = {"q": query}
    if has_images:
        params["hasImages"] = "true"

    return make_met_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path")],
        query=urlencode(params),
    )


@base_url
@url_path("objects")
def object_url(object_id: int, *args, **kwargs) -> str:
    return make_met_url(
        path_components=[kwargs.get("base_url"), kwargs.get("url_path"), object_id]
    )


def search(query: str, has_images: bool = False, timeout: float = None) -> tuple:
    """
    Search the collection and return the matching object ids. The API answers a search with
    no hits with "objectIDs": null, which comes back here as an empty tuple.
    """

    if timeout is None:
        timeout = config.REQUEST_TIMEOUT

    url = search_url(query, has_images=has_images)

    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        payload = r.json()

    except requests.exceptions.RequestException as error:
        raise SearchError(f"Search for '{query}' failed: {error}") from error

    except ValueError as error:
        raise SearchError(f"Search for '{query}' returned invalid JSON: {error}") from error

    if not isinstance(payload, dict) or "objectIDs" not in payload:
        raise SearchError(f"Search for '{query}' returned an unexpected response.")

    object_ids = payload["objectIDs"] or []

    try:
        # the API occasionally repeats ids, keep first occurrences in order
        return tuple(dict.fromkeys(int(object_id) for object_id in object_ids))

    except (TypeError, ValueError) as error:
        raise SearchError(f"Search for '{query}' returned malformed ids: {error}") from error


def get_object(object_id: int, timeout: float = None) -> ArtworkRecord:
    """
    Fetch one object and convert it to an ArtworkRecord. An object without a primary image
    is still a valid record, just not a usable one (empty image_url).
    """

    if timeout is None:
        timeout = config.REQUEST_TIMEOUT

    try:
        r = requests.get(object_url(object_id), timeout=timeout)
        r.raise_for_status()
        payload = r.json()

    except requests.exceptions.RequestException as error:
        raise RecordLookupError(f"object {object_id}: {error}") from error

    except ValueError as error:
        raise RecordLookupError(f"object {object_id}: invalid JSON ({error})") from error

    try:
        return ArtworkRecord(
            object_id=object_id,
            title=str(payload["title"] or ""),
            artist=str(payload["artistDisplayName"] or ""),
            image_url=str(payload["primaryImage"] or ""),
        )

    except (KeyError, TypeError) as error:
        raise RecordLookupError(f"object {object_id}: missing field {error}") from error
