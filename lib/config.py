#!/usr/bin/env python3
"""
Run configuration loaded from config_external.yaml

Example:

    catalog_api_url: "https://catalog.example.com/api/movie/"
    catalog_client_id: "..."
    catalog_timeout: 10
    duration_buckets: [90, 60, 30, 10, 5]
    ffprobe_path: ffprobe
    file_list: fileList.txt
    output: report.txt
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import yaml

from lib.constants import (
    DEFAULT_DURATION_BUCKETS, DEFAULT_FILE_LIST, DEFAULT_OUTPUT,
    DEFAULT_FFPROBE, DEFAULT_CATALOG_TIMEOUT, CLIENT_ID_ENV_VAR,
)

logger = logging.getLogger(__name__)


def _normalize_buckets(buckets) -> Tuple[int, ...]:
    """Validate buckets and return them sorted descending"""
    if not buckets:
        raise ValueError("duration_buckets must not be empty")
    result = []
    for bucket in buckets:
        if isinstance(bucket, bool) or not isinstance(bucket, int) or bucket <= 0:
            raise ValueError(f"duration_buckets must be positive integers, got {bucket!r}")
        result.append(bucket)
    return tuple(sorted(result, reverse=True))


def _normalize_timeout(timeout) -> float:
    """Catalog timeout must be a positive number of seconds"""
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not timeout > 0:
        raise ValueError(f"catalog_timeout must be a positive number of seconds, got {timeout!r}")
    return timeout


@dataclass(frozen=True)
class ReportConfig:
    """Read-only settings shared by the whole batch"""
    catalog_api_url: str = ''
    catalog_client_id: str = ''
    catalog_timeout: float = DEFAULT_CATALOG_TIMEOUT
    duration_buckets: Tuple[int, ...] = DEFAULT_DURATION_BUCKETS
    ffprobe_path: str = DEFAULT_FFPROBE
    file_list: Path = field(default_factory=lambda: Path(DEFAULT_FILE_LIST))
    output: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT))

    def __post_init__(self):
        # frozen: assign through object.__setattr__
        object.__setattr__(self, 'duration_buckets', _normalize_buckets(self.duration_buckets))
        object.__setattr__(self, 'catalog_timeout', _normalize_timeout(self.catalog_timeout))
        object.__setattr__(self, 'file_list', Path(self.file_list))
        object.__setattr__(self, 'output', Path(self.output))


def load_config(config_path: Optional[Path] = None, required: bool = False) -> ReportConfig:
    """
    Load configuration from a YAML file.

    A missing file falls back to defaults unless required is set, in which
    case FileNotFoundError is raised. The client id may also come from the
    CATALOG_CLIENT_ID environment variable.
    """
    data = {}
    if config_path is not None and config_path.exists():
        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse {config_path}: {e}") from e
        logger.info(f"Loaded config from {config_path}")
    elif required:
        raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        logger.info(f"No config at {config_path}, using defaults")

    if not isinstance(data, dict):
        raise ValueError(f"Config {config_path} must be a mapping")

    client_id = data.get('catalog_client_id') or os.environ.get(CLIENT_ID_ENV_VAR, '')

    return ReportConfig(
        catalog_api_url=data.get('catalog_api_url') or '',
        catalog_client_id=client_id,
        catalog_timeout=data.get('catalog_timeout', DEFAULT_CATALOG_TIMEOUT),
        duration_buckets=data.get('duration_buckets', DEFAULT_DURATION_BUCKETS),
        ffprobe_path=data.get('ffprobe_path') or DEFAULT_FFPROBE,
        file_list=data.get('file_list') or DEFAULT_FILE_LIST,
        output=data.get('output') or DEFAULT_OUTPUT,
    )
