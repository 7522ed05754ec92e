"""tests for options-record query encoding"""

from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError

from jirakit.schemas.jira.options import BoardListOptions, SearchOptions, UserPermissionSearch
from jirakit.utils.query import add_options, encode_query


class TestEncodeQuery:
    """test encode_query behavior"""

    def test_none_options_encode_to_empty(self):
        """no options record means no query string"""
        assert encode_query(None) == ""

    def test_unset_fields_are_omitted(self):
        """a record with every field unset encodes to nothing"""
        assert encode_query(BoardListOptions()) == ""

    def test_only_set_fields_under_declared_names(self):
        """parsing the encoded string yields back exactly the set fields"""
        options = BoardListOptions(boardType="scrum", projectKeyOrId="PROJ", maxResults=25)

        parsed = dict(parse_qsl(encode_query(options)))

        assert parsed == {"boardType": "scrum", "projectKeyOrId": "PROJ", "maxResults": "25"}

    def test_keys_are_sorted(self):
        """parameters come out in key order"""
        search = UserPermissionSearch(username="bob", permissions="BROWSE", issueKey="ABC-1")

        keys = [key for key, _ in parse_qsl(encode_query(search))]

        assert keys == sorted(keys)

    def test_explicit_zero_is_sent(self):
        """startAt=0 set by the caller is distinct from unset"""
        assert encode_query(SearchOptions(startAt=0)) == "startAt=0"

    def test_values_are_url_encoded(self):
        """reserved characters in values are escaped"""
        query = encode_query(BoardListOptions(name="Team A&B"))

        assert query == "name=Team+A%26B"
        assert dict(parse_qsl(query)) == {"name": "Team A&B"}

    def test_unknown_option_is_rejected(self):
        """options records refuse parameter names they do not declare"""
        with pytest.raises(ValidationError):
            BoardListOptions(type="scrum")

    def test_negative_pagination_is_rejected(self):
        """pagination fields must be non-negative"""
        with pytest.raises(ValidationError):
            SearchOptions(startAt=-1)


class TestAddOptions:
    """test add_options path building"""

    def test_path_unchanged_without_options(self):
        """no options leaves the path alone"""
        assert add_options("rest/agile/1.0/board", None) == "rest/agile/1.0/board"

    def test_appends_query(self):
        """a query string is attached with '?'"""
        path = add_options("rest/agile/1.0/board", BoardListOptions(name="ops"))

        assert path == "rest/agile/1.0/board?name=ops"

    def test_extends_existing_query(self):
        """a path that already has a query is extended with '&'"""
        path = add_options("/rest/api/2/user?username=bob", SearchOptions(startAt=5))

        assert path == "/rest/api/2/user?username=bob&startAt=5"
