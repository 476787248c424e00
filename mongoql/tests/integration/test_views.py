"""
Tests for serving a schema over HTTP with graphene-django.
"""

import json

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import Client, override_settings

from mongoql import graphqlize, models
from mongoql.testing import build_request
from mongoql.tests import fixtures
from mongoql.urls import build_urlpatterns, get_configured_api


@pytest.fixture
def clean_fixture_store():
    for name in ("tweets", "users"):
        fixtures.store.collection(name).delete_many({})
    yield fixtures.store
    for name in ("tweets", "users"):
        fixtures.store.collection(name).delete_many({})


def _post(client, query, variables=None):
    payload = {"query": query}
    if variables:
        payload["variables"] = variables
    response = client.post(
        "/graphql/", data=json.dumps(payload), content_type="application/json"
    )
    return response, json.loads(response.content)


@pytest.mark.integration
class TestApiView:
    def test_view_executes_mutation(self, user, users):
        view = models(user).as_view()

        response = view(build_request('mutation { createUser(name: "Craig") { name } }'))

        assert response.status_code == 200
        assert json.loads(response.content)["data"] == {"createUser": {"name": "Craig"}}
        assert users.count_documents({"name": "Craig"}) == 1

    def test_validation_errors_in_response_body(self, user):
        view = models(user).as_view()

        response = view(build_request('query { user(_id: "bad") { name } }'))
        body = json.loads(response.content)

        assert body["errors"][0]["message"].startswith("Invalid arguments for user")

    def test_graphqlize_accepts_mapping(self, user, users):
        view = graphqlize({"user": user})

        response = view(
            build_request(
                "mutation Create($name: String!) { createUser(name: $name) { name } }",
                variables={"name": "Paul"},
            )
        )

        assert json.loads(response.content)["data"]["createUser"]["name"] == "Paul"


@pytest.mark.integration
class TestUrlConf:
    def test_configured_api(self):
        assert get_configured_api() is fixtures.api

    @override_settings(MONGOQL={"schema": None})
    def test_missing_schema_setting(self):
        with pytest.raises(ImproperlyConfigured):
            get_configured_api()

    def test_unimportable_schema(self):
        with pytest.raises(ImproperlyConfigured):
            get_configured_api("mongoql.tests.fixtures.missing")

    def test_custom_endpoint(self, user):
        patterns = build_urlpatterns(models(user), endpoint_path="api/graphql/")
        assert str(patterns[0].pattern) == "api/graphql/"

    def test_crud_over_http(self, clean_fixture_store):
        client = Client()

        response, body = _post(
            client, 'mutation { createTweet(body: "hello") { _id body published } }'
        )
        assert response.status_code == 200
        created = body["data"]["createTweet"]
        assert created["published"] is False

        _, body = _post(client, "query { tweets { _id body } }")
        assert body["data"]["tweets"] == [{"_id": created["_id"], "body": "hello"}]

        _, body = _post(
            client,
            "mutation Remove($id: ID!) { deleteTweet(_id: $id) { _id } }",
            {"id": created["_id"]},
        )
        assert body["data"] == {"deleteTweet": None}
        assert clean_fixture_store.collection("tweets").count_documents({}) == 0

    def test_standalone_operations_over_http(self, clean_fixture_store):
        client = Client()

        _, tags = _post(client, "query { tags }")
        _, blast = _post(client, 'mutation { emailBlast(emails: ["a@example.com"]) }')

        assert tags["data"] == {"tags": ["hello", "world"]}
        assert blast["data"] == {"emailBlast": "a@example.com"}
