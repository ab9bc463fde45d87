import json
import sys

import pytest

from wirebox import Container, DictSource, JsonTreeSource, TreeSource, YamlTreeSource, load_refs
from wirebox.exceptions import ConfigurationError
from wirebox.proxy import is_swappable


def test_dict_source_entries_become_swappable_refs():
    c = Container()
    assert load_refs(c, DictSource({"db": {"host": "localhost", "port": 5432}})) is c
    assert is_swappable(c.get("db"))
    assert c.db["host"] == "localhost"


def test_load_refs_directly():
    data = {"db": {"host": "localhost"}}
    c = load_refs(Container(), DictSource(data), directly=True)
    assert c.get("db") is data["db"]


def test_reloading_retargets_existing_holders():
    c = load_refs(Container(), DictSource({"db": {"host": "old"}}))
    held = c.db
    load_refs(c, DictSource({"db": {"host": "new"}}))
    assert held["host"] == "new"


def test_json_source(tmp_path):
    path = tmp_path / "refs.json"
    path.write_text(json.dumps({"settings": {"debug": True}, "name": "app"}), encoding="utf-8")
    c = load_refs(Container(), JsonTreeSource(str(path)))
    assert c.settings["debug"] is True
    assert c.name == "app"


def test_json_source_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Failed to load JSON config"):
        JsonTreeSource(str(tmp_path / "nope.json")).get_tree()


def test_json_source_rejects_non_mapping_root(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    c = Container()
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        load_refs(c, JsonTreeSource(str(path)))
    assert list(c.own_names()) == []


def test_yaml_source(tmp_path):
    path = tmp_path / "refs.yaml"
    path.write_text("db:\n  host: localhost\n  port: 5432\nmode: test\n", encoding="utf-8")
    c = load_refs(Container(), YamlTreeSource(str(path)))
    assert c.db["port"] == 5432
    assert c.mode == "test"


def test_yaml_source_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert YamlTreeSource(str(path)).get_tree() == {}


def test_yaml_source_parse_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("db: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Failed to load YAML config"):
        YamlTreeSource(str(path)).get_tree()


def test_yaml_source_without_pyyaml(tmp_path, monkeypatch):
    monkeypatch.setitem(sys.modules, "yaml", None)
    with pytest.raises(ConfigurationError, match="PyYAML not installed"):
        YamlTreeSource(str(tmp_path / "any.yaml")).get_tree()


def test_base_tree_source_is_abstract():
    with pytest.raises(NotImplementedError):
        TreeSource().get_tree()
