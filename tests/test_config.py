#!/usr/bin/env python3
"""
Test suite for lib/config.py — YAML configuration
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.config import ReportConfig, load_config


class TestReportConfig:

    def test_defaults(self):
        config = ReportConfig()
        assert config.duration_buckets == (90, 60, 30, 10, 5)
        assert config.file_list == Path('fileList.txt')
        assert config.output == Path('report.txt')
        assert config.catalog_client_id == ''

    def test_buckets_sorted_descending(self):
        assert ReportConfig(duration_buckets=[5, 90, 30]).duration_buckets == (90, 30, 5)

    @pytest.mark.parametrize("buckets", [[], None, [0, 5], [-10], ["60"], [True]])
    def test_invalid_buckets(self, buckets):
        with pytest.raises(ValueError):
            ReportConfig(duration_buckets=buckets)

    @pytest.mark.parametrize("timeout", ["ten", None, 0, -1, True, [10]])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValueError):
            ReportConfig(catalog_timeout=timeout)

    def test_fractional_timeout(self):
        assert ReportConfig(catalog_timeout=2.5).catalog_timeout == 2.5

    def test_frozen(self):
        config = ReportConfig()
        with pytest.raises(AttributeError):
            config.catalog_client_id = 'x'


class TestLoadConfig:

    def test_yaml_values(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text(
            "catalog_api_url: https://catalog.test/\n"
            "catalog_client_id: abc\n"
            "catalog_timeout: 3\n"
            "duration_buckets: [10, 120, 45]\n"
            "file_list: list.txt\n"
            "output: out/report.txt\n",
            encoding='utf-8',
        )
        config = load_config(path)
        assert config.catalog_api_url == 'https://catalog.test/'
        assert config.catalog_client_id == 'abc'
        assert config.catalog_timeout == 3
        assert config.duration_buckets == (120, 45, 10)
        assert config.file_list == Path('list.txt')
        assert config.output == Path('out/report.txt')
        assert config.ffprobe_path == 'ffprobe'

    def test_missing_optional_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv('CATALOG_CLIENT_ID', raising=False)
        config = load_config(tmp_path / 'absent.yaml')
        assert config == ReportConfig()

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'absent.yaml', required=True)

    def test_client_id_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv('CATALOG_CLIENT_ID', 'from-env')
        path = tmp_path / 'config.yaml'
        path.write_text("catalog_api_url: https://catalog.test/\n", encoding='utf-8')
        assert load_config(path).catalog_client_id == 'from-env'

    def test_file_client_id_wins_over_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv('CATALOG_CLIENT_ID', 'from-env')
        path = tmp_path / 'config.yaml'
        path.write_text("catalog_client_id: from-file\n", encoding='utf-8')
        assert load_config(path).catalog_client_id == 'from-file'

    def test_empty_bucket_list_rejected(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("duration_buckets: []\n", encoding='utf-8')
        with pytest.raises(ValueError):
            load_config(path)

    def test_non_numeric_timeout_rejected(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("catalog_timeout: soon\n", encoding='utf-8')
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("duration_buckets: [1, 2\n", encoding='utf-8')
        with pytest.raises(ValueError):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text("- a\n- b\n", encoding='utf-8')
        with pytest.raises(ValueError):
            load_config(path)
