"""Domain enums for the serializer."""
from enum import Enum


class ProjectVersion(Enum):
    """Editor generation a project was created with."""
    ACE = "ace"
    VX = "vx"
    XP = "xp"


class Direction(Enum):
    """Top-level conversion modes."""
    DATA_BIN_TO_TEXT = "data_bin_to_text"
    DATA_TEXT_TO_BIN = "data_text_to_bin"
    SAVE_BIN_TO_TEXT = "save_bin_to_text"
    SAVE_TEXT_TO_BIN = "save_text_to_bin"
    SCRIPTS_BIN_TO_TEXT = "scripts_bin_to_text"
    SCRIPTS_TEXT_TO_BIN = "scripts_text_to_bin"
    ALL_BIN_TO_TEXT = "all_bin_to_text"
    ALL_TEXT_TO_BIN = "all_text_to_bin"


class CodecId(Enum):
    """Load/dump routines known to the codec registry."""
    DATA_FILE = "data_file"
    YAML_FILE = "yaml_file"
    RAW_FILE = "raw_file"
    SAVE_STREAM = "save_stream"


class ErrorKind(Enum):
    """Fatal error categories."""
    MISSING_SOURCE = "MISSING_SOURCE"
    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    CODEC_FAILURE = "CODEC_FAILURE"
    UNRECOGNIZED_DIRECTION = "UNRECOGNIZED_DIRECTION"
