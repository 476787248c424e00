import pytest

from mongoql.core.strings import capitalize, is_graphql_name, pluralize


@pytest.mark.unit
class TestPluralize:
    @pytest.mark.parametrize(
        "singular,plural",
        [
            ("tweet", "tweets"),
            ("user", "users"),
            ("policy", "policies"),
            ("day", "days"),
            ("status", "statuses"),
            ("box", "boxes"),
            ("branch", "branches"),
            ("person", "people"),
            ("leaf", "leaves"),
            ("news", "news"),
            ("quiz", "quizzes"),
            ("buzz", "buzzes"),
            ("waltz", "waltzes"),
            ("hero", "heroes"),
            ("potato", "potatoes"),
            ("photo", "photos"),
        ],
    )
    def test_words(self, singular, plural):
        assert pluralize(singular) == plural

    def test_only_last_camel_case_word(self):
        assert pluralize("blogPost") == "blogPosts"
        assert pluralize("salesPerson") == "salesPeople"
        assert pluralize("categoryEntry") == "categoryEntries"

    def test_empty(self):
        assert pluralize("") == ""


@pytest.mark.unit
class TestCapitalize:
    def test_first_letter_only(self):
        assert capitalize("tweet") == "Tweet"
        assert capitalize("blogPost") == "BlogPost"
        assert capitalize("") == ""


@pytest.mark.unit
class TestGraphqlNames:
    @pytest.mark.parametrize("name", ["tweet", "_id", "blogPost2"])
    def test_valid(self, name):
        assert is_graphql_name(name)

    @pytest.mark.parametrize("name", ["", "2fast", "bad-name", "bad name"])
    def test_invalid(self, name):
        assert not is_graphql_name(name)
