import pytest

from partial_tree_mst.config import MSTConfig, load_config


def test_defaults_without_file() -> None:
    config = load_config(None)
    assert config == MSTConfig()
    assert config.report_arcs is True
    assert config.verify is False
    assert config.benchmark.sizes == [10, 100, 1000]


def test_missing_file_yields_defaults(tmp_path) -> None:
    assert load_config(tmp_path / "absent.yaml") == MSTConfig()


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "mst.yaml"
    path.write_text(
        "verify: true\n"
        "log_level: DEBUG\n"
        "benchmark:\n"
        "  sizes: [5, 50]\n"
        "  seed: 11\n"
    )
    config = load_config(path)
    assert config.verify is True
    assert config.log_level == "DEBUG"
    assert config.benchmark.sizes == [5, 50]
    assert config.benchmark.seed == 11
    assert config.benchmark.iterations == 3


def test_empty_yaml(tmp_path) -> None:
    path = tmp_path / "mst.yaml"
    path.write_text("")
    assert load_config(path) == MSTConfig()


def test_unknown_keys_rejected(tmp_path) -> None:
    path = tmp_path / "mst.yaml"
    path.write_text("colour: blue\n")
    with pytest.raises(ValueError, match="colour"):
        load_config(path)
    with pytest.raises(ValueError, match="warmup"):
        MSTConfig.from_dict({"benchmark": {"warmup": 1}})


def test_non_mapping_rejected(tmp_path) -> None:
    path = tmp_path / "mst.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)
