"""Shared constants: file extensions, directory names and default tunables.

Centralizes the project conventions used by the layout, orchestration and
script bundle modules.
"""

from rgss_serializer.domain.enums import ProjectVersion

# ── Extensions ───────────────────────────────────────────────────────────

YAML_EXT = '.yaml'
SCRIPT_EXT = '.rb'

DATA_EXT_BY_VERSION: dict[ProjectVersion, str] = {
    ProjectVersion.ACE: '.rvdata2',
    ProjectVersion.VX: '.rvdata',
    ProjectVersion.XP: '.rxdata',
}

# Older editors expect mapping keys in a stable order
SORTED_VERSIONS = {ProjectVersion.VX, ProjectVersion.XP}

# ── Project Layout ───────────────────────────────────────────────────────

DATA_DIR_NAME = 'Data'
YAML_DIR_NAME = 'YAML'
SCRIPT_DIR_NAME = 'Scripts'

SCRIPTS_BASE = 'Scripts'

# ── Script Names ─────────────────────────────────────────────────────────

BLANK_SCRIPT_NAME = 'blank'
NAME_SEPARATOR = '_'

# ── Staleness ────────────────────────────────────────────────────────────

# Seconds; absorbs mtime truncation by filesystems and serializers
GRACE_MARGIN = 1

# ── Tunables ─────────────────────────────────────────────────────────────

DEFAULT_LINE_WIDTH = 130
DEFAULT_TABLE_WIDTH = 20
UNLIMITED = -1

BEST_COMPRESSION = 9
