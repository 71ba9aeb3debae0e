from swagger_assembler.builder.security import add_security, normalize_scopes


class TestNormalizeScopes:
    def test_sequence(self):
        assert normalize_scopes(["read", "write"]) == ["read", "write"]
        assert normalize_scopes(("read",)) == ["read"]

    def test_missing_or_not_a_sequence(self):
        assert normalize_scopes(None) == []
        assert normalize_scopes("read") == []
        assert normalize_scopes(42) == []


class TestAddSecurity:
    def test_default_destination(self):
        operation = {}
        add_security(operation, "apiKey")
        assert operation == {"security": [{"apiKey": []}]}

    def test_appends_in_order(self):
        operation = {}
        add_security(operation, "oauth2", ["read"])
        add_security(operation, "apiKey")
        assert operation["security"] == [{"oauth2": ["read"]}, {"apiKey": []}]

    def test_custom_destination_also_lists_scheme_under_security(self):
        operation = {}
        add_security(operation, "oauth2", ["read"], "adminSecurity")
        assert operation["adminSecurity"] == [{"oauth2": ["read"]}]
        assert operation["security"] == [{"oauth2": []}]

    def test_destination_compare_is_case_insensitive(self):
        operation = {}
        add_security(operation, "oauth2", ["read"], "Security")
        assert operation == {"Security": [{"oauth2": ["read"]}]}
