import json

import pytest

from upgrade_notes.config import ExtractorConfig, config_from_dict, load_config
from upgrade_notes.utils.contracts import ContractError


@pytest.mark.unit
def test_defaults():
    config = ExtractorConfig()
    assert config.vendor_tag == "gke"
    assert config.heading_date_format == "%B %d, %Y"


@pytest.mark.unit
def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"vendor_tag": "eks", "heading_date_format": "%b %d, %Y"}), encoding="utf-8")
    config = load_config(path)
    assert config == ExtractorConfig(vendor_tag="eks", heading_date_format="%b %d, %Y")


@pytest.mark.unit
def test_partial_config_keeps_defaults():
    assert config_from_dict({"vendor_tag": "aks"}) == ExtractorConfig(vendor_tag="aks")
    assert config_from_dict({}) == ExtractorConfig()


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        {"vendor_tag": "GKE"},
        {"vendor_tag": "gke."},
        {"vendor_tag": ""},
        {"vendor_tag": 5},
        {"unknown": True},
    ],
)
def test_invalid_config_rejected(payload):
    with pytest.raises(ContractError) as excinfo:
        config_from_dict(payload)
    assert "extractor_config" in str(excinfo.value)


@pytest.mark.unit
def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


@pytest.mark.unit
@pytest.mark.parametrize("tag", ["not a tag!", "GKE", ""])
def test_direct_construction_validates_tag(tag):
    with pytest.raises(ContractError):
        ExtractorConfig(vendor_tag=tag)


@pytest.mark.unit
def test_config_file_must_be_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContractError) as excinfo:
        load_config(path)
    assert "not valid JSON" in str(excinfo.value)


@pytest.mark.unit
def test_config_file_must_be_utf8(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(ContractError):
        load_config(path)
