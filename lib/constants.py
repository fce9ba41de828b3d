#!/usr/bin/env python3
"""
Shared constants for the duration report builder

Single source of truth for the filename pattern, reporting buckets, console
escape codes and the localized report strings.
DO NOT duplicate these values in other modules - import from here instead.
"""

import re

# Filename contract: [sNNeNN][_]coid<ID>...._r<W>x<H>p...
# Groups: season, episode, catalog id, width, height
FILENAME_PATTERN = re.compile(
    r'.*?(?:s(\d{2})e(\d{2,4}))?(?:_)?coid(\d+).*_r(\d+)x(\d+)p.*',
    re.ASCII,  # \d is ASCII digits only
)

# Shown to the user when a filename does not match FILENAME_PATTERN
FILENAME_PATTERN_HINT = r'[sNNeNN_]coid(\d+)..._r(\d+)x(\d+)p...'

# Nominal runtimes (minutes) used to label files in the report.
# A 47-minute file is reported under the 60-minute bucket.
DEFAULT_DURATION_BUCKETS = (90, 60, 30, 10, 5)

# Anything wider or taller than PAL SD is HD
SD_MAX_WIDTH = 1024
SD_MAX_HEIGHT = 576
RESOLUTION_SD = 'SD'
RESOLUTION_HD = 'HD'

# Catalog categories
CATEGORY_SHOW = 'SHOW'
CATEGORY_MOVIE = 'MOVIE'

# Localized report strings
DURATION_LABEL_FORMAT = '{bucket:02d} минут'
SHOW_EPISODE_FORMAT = '{title}. {season} сезон. {episode} серия'
SHOW_PLACEHOLDER_FORMAT = '{title}. ####'

# Console layout: visible column widths
TITLE_WIDTH = 32
CATALOG_ID_WIDTH = 8
DURATION_LABEL_WIDTH = 12
FILENAME_WIDTH = 32
COLUMN_SEPARATOR = '  '

# ANSI escape codes
ANSI_RESET = '\x1b[0m'
ANSI_RED_BOLD = '\x1b[31;1m'
ANSI_YELLOW_BOLD = '\x1b[33;1m'
ANSI_DIM = '\x1b[30;1m'
ANSI_HIDE_CURSOR = '\x1b[?25l'
ANSI_SHOW_CURSOR = '\x1b[?25h'

# Color/style sequences with one or two numeric codes, e.g. \x1b[0m, \x1b[31;1m
ANSI_STYLE_PATTERN = re.compile(r'\x1b\[\d+m|\x1b\[\d+;\d+m')

# Marker appended to truncated console fields
ELLIPSIS = ANSI_DIM + '...' + ANSI_RESET
ELLIPSIS_WIDTH = 3

# Defaults for config_external.yaml
DEFAULT_CONFIG_PATH = 'config_external.yaml'
DEFAULT_FILE_LIST = 'fileList.txt'
DEFAULT_OUTPUT = 'report.txt'
DEFAULT_FFPROBE = 'ffprobe'
DEFAULT_CATALOG_TIMEOUT = 10
CLIENT_ID_ENV_VAR = 'CATALOG_CLIENT_ID'
