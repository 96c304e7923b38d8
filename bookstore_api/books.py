"""
Books resource group: ``/api/v1/Books``.

Fields: ``id``, ``title``, ``description``, ``pageCount``, ``excerpt``,
``publishDate``.  Payloads are literal JSON text so the malformed-body
case can be sent exactly as written.
"""

from __future__ import annotations

from bookstore_api.context import MissingFieldPolicy
from bookstore_api.resources import NONEXISTENT_ID, ResourceGroup
from bookstore_api.scenarios import Scenario, statuses

COLLECTION_PATH = "/api/v1/Books"
ITEM_PATH = "/api/v1/Books/{id}"

CREATE_BODY = """
{
    "title": "Automated Test Book",
    "description": "Book created by API automation tests",
    "pageCount": 123,
    "excerpt": "Testing is fun!",
    "publishDate": "2020-01-01T00:00:00"
}
"""


def update_body(target_id: int) -> str:
    return """
{
    "id": %d,
    "title": "Updated Test Book",
    "description": "Updated description",
    "pageCount": 456,
    "excerpt": "Updated excerpt",
    "publishDate": "2021-01-01T00:00:00"
}
""" % target_id


BOOKS = ResourceGroup(
    name="Book",
    collection_path=COLLECTION_PATH,
    item_path=ITEM_PATH,
    create_body=CREATE_BODY,
    update_body=update_body,
)

EDGE_CASE_NAMES = (
    "get_invalid_id",
    "create_missing_title",
    "create_negative_page_count",
    "create_invalid_date",
    "create_future_date",
    "update_nonexistent",
    "delete_nonexistent",
    "create_malformed_json",
    "create_extra_fields",
)


def _missing_title(policy: MissingFieldPolicy) -> Scenario:
    body = """
    {
        "description": "Missing title field",
        "pageCount": 100,
        "excerpt": "No title",
        "publishDate": "2020-01-01T00:00:00"
    }
    """
    if policy is MissingFieldPolicy.STRICT:
        return Scenario(
            name="create_missing_title",
            method="POST",
            path=COLLECTION_PATH,
            body=body,
            expected_status=statuses(400, 404, 422),
        )
    return Scenario(
        name="create_missing_title",
        method="POST",
        path=COLLECTION_PATH,
        body=body,
        expected_status=statuses(200),
        expected_fields={"title": None, "description": "Missing title field"},
    )


def edge_cases(policy: MissingFieldPolicy) -> dict[str, Scenario]:
    """Return the independent Books edge cases keyed by name."""
    scenarios = [
        Scenario(
            name="get_invalid_id",
            method="GET",
            path=ITEM_PATH,
            path_params={"id": NONEXISTENT_ID},
            expected_status=statuses(400, 404),
        ),
        _missing_title(policy),
        Scenario(
            name="create_negative_page_count",
            method="POST",
            path=COLLECTION_PATH,
            body="""
            {
                "title": "Negative Pages Book",
                "description": "A book with negative pages",
                "pageCount": -50,
                "excerpt": "Impossible book",
                "publishDate": "2020-01-01T00:00:00"
            }
            """,
            expected_status=statuses(200),
            expected_fields={"pageCount": -50},
        ),
        Scenario(
            name="create_invalid_date",
            method="POST",
            path=COLLECTION_PATH,
            body="""
            {
                "title": "Invalid Date Book",
                "description": "A book with invalid date",
                "pageCount": 100,
                "excerpt": "Bad date",
                "publishDate": "invalid-date-format"
            }
            """,
            expected_status=statuses(200, 400),
        ),
        Scenario(
            name="create_future_date",
            method="POST",
            path=COLLECTION_PATH,
            body="""
            {
                "title": "Future Book",
                "description": "A book from the future",
                "pageCount": 300,
                "excerpt": "Time travel",
                "publishDate": "2099-12-31T23:59:59"
            }
            """,
            expected_status=statuses(200),
            expected_fields={"publishDate": "2099-12-31T23:59:59"},
        ),
        Scenario(
            name="update_nonexistent",
            method="PUT",
            path=ITEM_PATH,
            path_params={"id": NONEXISTENT_ID},
            body="""
            {
                "id": %d,
                "title": "Non-existent Book",
                "description": "This book doesn't exist",
                "pageCount": 100,
                "excerpt": "Not found",
                "publishDate": "2020-01-01T00:00:00"
            }
            """ % NONEXISTENT_ID,
            expected_status=statuses(200, 204, 404),
        ),
        Scenario(
            name="delete_nonexistent",
            method="DELETE",
            path=ITEM_PATH,
            path_params={"id": NONEXISTENT_ID},
            expected_status=statuses(200, 204, 404),
        ),
        Scenario(
            name="create_malformed_json",
            method="POST",
            path=COLLECTION_PATH,
            # Missing closing brace.
            body="""
            {
                "title": "Test Book",
                "description": "Missing closing brace"
            """,
            expected_status=statuses(400, 500),
        ),
        Scenario(
            name="create_extra_fields",
            method="POST",
            path=COLLECTION_PATH,
            body="""
            {
                "title": "Extra Fields Book",
                "description": "Carries fields the API does not know",
                "pageCount": 42,
                "excerpt": "Extra",
                "publishDate": "2020-01-01T00:00:00",
                "unexpectedField": "ShouldBeIgnored",
                "anotherField": 123
            }
            """,
            expected_status=statuses(200),
            expected_fields={"title": "Extra Fields Book", "pageCount": 42},
        ),
    ]
    return {scenario.name: scenario for scenario in scenarios}
