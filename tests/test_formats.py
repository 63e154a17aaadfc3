import pytest

from interface_mock.parser.formats import infer_string_format


class TestInferStringFormat:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("email string", "email"),
            ("avatarUrl string", "url"),
            ("resourceUri string", "url"),
            ("phoneNumber string", "phone"),
            ("firstName string", "name"),
            ("billingAddress string", "address"),
            ("company string", "company"),
            ("uuid string", "uuid"),
            ("userId string", "uuid"),
            ("title string", None),
            ("", None),
        ],
    )
    def test_keywords(self, text, expected):
        assert infer_string_format(text) == expected

    def test_case_insensitive(self):
        assert infer_string_format("EMAIL") == "email"

    def test_first_rule_wins(self):
        assert infer_string_format("companyId string") == "company"
        assert infer_string_format("companyName string") == "name"
        assert infer_string_format("emailAddress string") == "email"

    def test_id_substring_quirk(self):
        # "id" is matched anywhere, so these are treated as uuids.
        assert infer_string_format("video string") == "uuid"
        assert infer_string_format("guide string") == "uuid"
