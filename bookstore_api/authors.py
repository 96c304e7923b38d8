"""Authors resource group: ``/api/v1/Authors`` with ``id``, ``firstName``, ``lastName``."""

from __future__ import annotations

from bookstore_api.context import MissingFieldPolicy
from bookstore_api.resources import NONEXISTENT_ID, ResourceGroup
from bookstore_api.scenarios import Scenario, statuses

COLLECTION_PATH = "/api/v1/Authors"
ITEM_PATH = "/api/v1/Authors/{id}"

CREATE_BODY = """
{
    "firstName": "Test",
    "lastName": "Author"
}
"""


def update_body(target_id: int) -> str:
    return """
{
    "id": %d,
    "firstName": "Updated",
    "lastName": "Author"
}
""" % target_id


AUTHORS = ResourceGroup(
    name="Author",
    collection_path=COLLECTION_PATH,
    item_path=ITEM_PATH,
    create_body=CREATE_BODY,
    update_body=update_body,
)

EDGE_CASE_NAMES = (
    "get_invalid_id",
    "create_missing_first_name",
    "create_null_fields",
    "create_special_characters",
    "update_nonexistent",
    "delete_nonexistent",
    "create_malformed_json",
    "create_extra_fields",
)


def _missing_first_name(policy: MissingFieldPolicy) -> Scenario:
    body = '{"lastName": "MissingFirstName"}'
    if policy is MissingFieldPolicy.STRICT:
        return Scenario(
            name="create_missing_first_name",
            method="POST",
            path=COLLECTION_PATH,
            body=body,
            expected_status=statuses(400, 404, 422),
        )
    return Scenario(
        name="create_missing_first_name",
        method="POST",
        path=COLLECTION_PATH,
        body=body,
        expected_status=statuses(200),
        expected_fields={"firstName": None, "lastName": "MissingFirstName"},
    )


def _null_fields(policy: MissingFieldPolicy) -> Scenario:
    # An explicit null is judged the same way as an absent field.
    body = '{"firstName": null, "lastName": null}'
    if policy is MissingFieldPolicy.STRICT:
        return Scenario(
            name="create_null_fields",
            method="POST",
            path=COLLECTION_PATH,
            body=body,
            expected_status=statuses(400, 404, 422),
        )
    return Scenario(
        name="create_null_fields",
        method="POST",
        path=COLLECTION_PATH,
        body=body,
        expected_status=statuses(200),
        expected_fields={"firstName": None, "lastName": None},
    )


def edge_cases(policy: MissingFieldPolicy) -> dict[str, Scenario]:
    """Return the independent Authors edge cases keyed by name."""
    scenarios = [
        Scenario(
            name="get_invalid_id",
            method="GET",
            path=ITEM_PATH,
            path_params={"id": NONEXISTENT_ID},
            expected_status=statuses(400, 404),
        ),
        _missing_first_name(policy),
        _null_fields(policy),
        Scenario(
            name="create_special_characters",
            method="POST",
            path=COLLECTION_PATH,
            body='{"firstName": "José María", "lastName": "García-Pérez"}',
            expected_status=statuses(200),
            expected_fields={"firstName": "José María", "lastName": "García-Pérez"},
        ),
        Scenario(
            name="update_nonexistent",
            method="PUT",
            path=ITEM_PATH,
            path_params={"id": NONEXISTENT_ID},
            body='{"id": %d, "firstName": "Non", "lastName": "Existent"}' % NONEXISTENT_ID,
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
                "firstName": "Test",
                "lastName": "Author"
            """,
            expected_status=statuses(400, 500),
        ),
        Scenario(
            name="create_extra_fields",
            method="POST",
            path=COLLECTION_PATH,
            body="""
            {
                "firstName": "Test",
                "lastName": "Author",
                "unexpectedField": "ShouldBeIgnored",
                "anotherField": 123
            }
            """,
            expected_status=statuses(200),
            expected_fields={"firstName": "Test", "lastName": "Author"},
        ),
    ]
    return {scenario.name: scenario for scenario in scenarios}
