import pytest

from wordfilter import FilterOptions, load_config


def _write_cfg(tmp_path, content: str) -> str:
    path = tmp_path / "cfg.yaml"
    path.write_text(content)
    return str(path)


def test_list_must_be_sequence(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  list: hello\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "'list'" in str(exc.value)


def test_exclude_entries_must_be_strings(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  exclude: [1, 2]\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "'exclude'" in str(exc.value)


def test_filter_section_must_be_mapping(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter: [a, b]\n")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_placeholder_must_be_string(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  placeholder: 5\n")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_empty_blacklist_warns(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  empty_list: true\n")
    with pytest.warns(UserWarning) as record:
        opts = FilterOptions.from_yaml(cfg_path)

    assert opts.empty_list is True
    assert opts.words == []
    assert any("empty_list" in str(w.message) for w in record)


def test_empty_file_gives_defaults(tmp_path):
    cfg_path = _write_cfg(tmp_path, "")
    opts = load_config(cfg_path)
    assert opts == FilterOptions()


def test_aliased_placeholder_must_be_string(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  empty_list: true\n  list: [x]\n  placeHolder: 5\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "'placeholder'" in str(exc.value)


def test_aliased_list_must_be_sequence(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  emptyList: true\n  words: hello\n")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_empty_list_must_be_boolean(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  empty_list: 'false'\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "'empty_list'" in str(exc.value)

    cfg_path = _write_cfg(tmp_path, "filter:\n  emptyList: 'no'\n")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_pattern_options_must_be_strings(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  splitRegex: 3\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "'split_pattern'" in str(exc.value)


def test_words_key_is_read_as_list(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  empty_list: true\n  words: [foo, bar]\n")
    opts = load_config(cfg_path)
    assert opts.words == ["foo", "bar"]


def test_list_and_words_together_are_rejected(tmp_path):
    cfg_path = _write_cfg(tmp_path, "filter:\n  list: [foo]\n  words: [bar]\n")
    with pytest.raises(ValueError) as exc:
        load_config(cfg_path)
    assert "words" in str(exc.value)
