import json

import pytest

from config.tree_loader import TreeLoadError, load_tree, parse_tree
from treepath import find_path


def _write(tmp_path, data, name="tree.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


EXAMPLE = [
    {
        "id": 1,
        "sub_categories": [
            {"id": 2, "sub_categories": []},
            {"id": 3, "sub_categories": [{"id": 4, "sub_categories": []}]},
        ],
    }
]


def test_load_tree_reads_root_list(tmp_path):
    roots = load_tree(_write(tmp_path, EXAMPLE))

    assert roots == EXAMPLE
    assert find_path([4, 1, 3], roots).ids() == [1, 3, 4]


@pytest.mark.parametrize(
    "data",
    [{"roots": EXAMPLE}, EXAMPLE[0], {"sub_categories": EXAMPLE}],
    ids=["roots-key", "single-root", "children-key"],
)
def test_load_tree_accepts_wrapped_layouts(tmp_path, data):
    roots = load_tree(_write(tmp_path, data))

    assert [r["id"] for r in roots] == [1]


def test_load_tree_with_custom_keys(tmp_path):
    data = [{"key": 5, "kids": [{"key": 6}]}]

    roots = load_tree(_write(tmp_path, data), children_key="kids", id_key="key")

    assert find_path([6, 5], roots, children="kids", node_id="key").ids("key") == [5, 6]


def test_load_tree_missing_file(tmp_path):
    with pytest.raises(TreeLoadError, match="not found"):
        load_tree(tmp_path / "missing.json")


def test_load_tree_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(TreeLoadError, match="not valid JSON"):
        load_tree(path)


def test_load_tree_undecodable_file(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'[{"id": 1, "name": "\xff"}]')

    with pytest.raises(TreeLoadError, match="not UTF-8"):
        load_tree(path)


def test_load_tree_unreadable_path(tmp_path):
    with pytest.raises(TreeLoadError, match="could not be read"):
        load_tree(tmp_path)


def test_load_tree_deeply_nested_file(tmp_path):
    depth = 100000
    path = tmp_path / "deep.json"
    path.write_text("[" * depth + "]" * depth, encoding="utf-8")

    with pytest.raises(TreeLoadError, match="nested too deeply"):
        load_tree(path)


@pytest.mark.parametrize(
    "data, message",
    [
        (5, "must be a list"),
        ({"name": "nothing"}, "Expected a list of root nodes"),
        ([{"id": "1"}], "'id' must be an integer"),
        ([{"id": True}], "'id' must be an integer"),
        ([{"id": 1, "sub_categories": {"id": 2}}], "'sub_categories' must be a list"),
        ([{"id": 1, "sub_categories": [3]}], r"roots\[0\]\.sub_categories\[0\]"),
    ],
)
def test_parse_tree_rejects_bad_shapes(data, message):
    with pytest.raises(TreeLoadError, match=message):
        parse_tree(data)


def test_tree_load_error_is_a_value_error():
    assert issubclass(TreeLoadError, ValueError)
