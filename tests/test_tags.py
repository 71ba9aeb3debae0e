from swagger_assembler.builder.tags import merge_tags, unique_tags


class TestUniqueTags:
    def test_case_insensitive_dedup_keeps_first_spelling(self):
        assert unique_tags(["Users", "users", "ADMIN"]) == ["ADMIN", "Users"]

    def test_sorted_case_sensitively(self):
        assert unique_tags(["beta", "Alpha", "gamma"]) == ["Alpha", "beta", "gamma"]

    def test_empty(self):
        assert unique_tags([]) == []


class TestMergeTags:
    def test_sets_tags_on_untagged_operation(self):
        operation = {}
        merge_tags(operation, ["pets", "Pets"])
        assert operation["tags"] == ["pets"]

    def test_unions_with_existing_tags(self):
        operation = {"tags": ["Users"]}
        result = merge_tags(operation, ["users", "Admin"])
        assert result == ["Admin", "Users"]
        assert operation["tags"] == ["Admin", "Users"]
