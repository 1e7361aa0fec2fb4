from schema_cache.core.merge import deep_merge, merge_all


def test_override_wins_on_scalars() -> None:
    assert deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}


def test_nested_mappings_merge_recursively() -> None:
    base = {"enum": {"0": {"name": "Unknown"}}, "type": "integer_t"}
    override = {"enum": {"1": {"name": "Foo"}}}

    assert deep_merge(base, override) == {
        "enum": {"0": {"name": "Unknown"}, "1": {"name": "Foo"}},
        "type": "integer_t",
    }


def test_lists_are_replaced_not_concatenated() -> None:
    assert deep_merge({"range": [1, 2]}, {"range": [3]}) == {"range": [3]}


def test_mapping_replaces_scalar_and_back() -> None:
    assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}
    assert deep_merge({"a": {"b": 2}}, {"a": 1}) == {"a": 1}


def test_inputs_are_not_mutated() -> None:
    base = {"a": {"b": 1}}
    override = {"a": {"c": 2}}

    deep_merge(base, override)

    assert base == {"a": {"b": 1}}
    assert override == {"a": {"c": 2}}


def test_result_shares_no_nested_containers() -> None:
    base = {"enum": {"0": {"name": "Unknown"}}, "range": [1, 2]}
    override = {"enum": {"1": {"name": "Foo"}}, "tags": ["x"]}

    merged = deep_merge(base, override)
    merged["enum"]["0"]["name"] = "changed"
    merged["enum"]["1"]["name"] = "changed"
    merged["range"].append(3)
    merged["tags"].append("y")

    assert base == {"enum": {"0": {"name": "Unknown"}}, "range": [1, 2]}
    assert override == {"enum": {"1": {"name": "Foo"}}, "tags": ["x"]}


def test_merging_a_map_onto_itself_is_identity() -> None:
    data = {"a": {"b": [1, 2], "c": {"d": "x"}}, "e": None}
    assert deep_merge(data, data) == data


def test_merging_the_same_override_twice_is_idempotent() -> None:
    base = {"type": "string_t", "description": "Y", "enum": {"0": {"name": "Unknown"}}}
    override = {"description": "X", "enum": {"1": {"name": "Foo"}}}

    once = deep_merge(base, override)
    assert deep_merge(once, override) == once


def test_merge_all_applies_layers_in_order() -> None:
    assert merge_all([{"a": 1, "b": 1}, {"b": 2, "c": 2}, {"c": 3}]) == {"a": 1, "b": 2, "c": 3}
    assert merge_all([]) == {}
