"""Tests for CodecRegistry."""

import logging
import os
import threading

import pytest

from rgss_serializer.codec_registry import CodecRegistry
from rgss_serializer.domain.enums import CodecId
from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.formats.base_format import BaseFormat
from tests.conftest import BASE_TIME


class _FailingFormat(BaseFormat):

    def load(self, path):
        raise ValueError("bad payload")

    def dump(self, path, data, options):
        raise ValueError("cannot encode")


class TestCodecRegistry:
    """Tests for codec dispatch, stamping and error reporting."""

    def setup_method(self):
        self.registry = CodecRegistry()
        self.options = ConversionOptions()

    def test_all_codecs_registered(self):
        assert set(self.registry.get_supported_codecs()) == set(CodecId)

    def test_dump_then_load(self, tmp_path):
        path = str(tmp_path / 'Actors.rvdata2')
        self.registry.dump(CodecId.DATA_FILE, path, [None, {'id': 1}], BASE_TIME, self.options)
        assert self.registry.load(CodecId.DATA_FILE, path) == [None, {'id': 1}]

    def test_dump_stamps_mtime(self, tmp_path):
        path = str(tmp_path / 'Actors.yaml')
        self.registry.dump(CodecId.YAML_FILE, path, {'id': 1}, BASE_TIME, self.options)
        assert os.path.getmtime(path) == BASE_TIME

    def test_load_failure_logged_and_reraised(self, tmp_path, caplog):
        missing = str(tmp_path / 'Missing.rvdata2')
        with caplog.at_level(logging.ERROR, logger='rgss_serializer'):
            with pytest.raises(FileNotFoundError):
                self.registry.load(CodecId.DATA_FILE, missing)
        assert f"Exception loading {missing}" in caplog.text

    def test_dump_failure_logged_and_reraised(self, tmp_path, caplog):
        path = str(tmp_path / 'no_such_dir' / 'Actors.yaml')
        with caplog.at_level(logging.ERROR, logger='rgss_serializer'):
            with pytest.raises(FileNotFoundError):
                self.registry.dump(CodecId.YAML_FILE, path, {}, BASE_TIME, self.options)
        assert f"Exception dumping {path}" in caplog.text

    def test_original_exception_propagates_unchanged(self, tmp_path):
        self.registry.register_codec(CodecId.RAW_FILE, _FailingFormat())
        with pytest.raises(ValueError, match="bad payload"):
            self.registry.load(CodecId.RAW_FILE, str(tmp_path / 'x'))
        with pytest.raises(ValueError, match="cannot encode"):
            self.registry.dump(CodecId.RAW_FILE, str(tmp_path / 'x'), b'', BASE_TIME, self.options)

    def test_failed_dump_not_stamped(self, tmp_path):
        self.registry.register_codec(CodecId.RAW_FILE, _FailingFormat())
        path = tmp_path / 'x.rb'
        with pytest.raises(ValueError):
            self.registry.dump(CodecId.RAW_FILE, str(path), b'', BASE_TIME, self.options)
        assert not path.exists()

    def test_save_stream_codec(self, tmp_path):
        path = str(tmp_path / 'Save01.rvdata2')
        self.registry.dump(CodecId.SAVE_STREAM, path, [1, 'two', {'three': 3}], BASE_TIME, self.options)
        assert self.registry.load(CodecId.SAVE_STREAM, path) == [1, 'two', {'three': 3}]

    def test_unpicklable_payload_leaves_no_file(self, tmp_path):
        path = tmp_path / 'Items.rvdata2'
        with pytest.raises(TypeError):
            self.registry.dump(CodecId.DATA_FILE, str(path), [threading.Lock()], BASE_TIME, self.options)
        assert not path.exists()
        assert os.listdir(tmp_path) == []

    def test_failed_dump_keeps_previous_file(self, tmp_path):
        path = tmp_path / 'Items.rvdata2'
        self.registry.dump(CodecId.DATA_FILE, str(path), [None, {'id': 1}], BASE_TIME, self.options)
        with pytest.raises(TypeError):
            self.registry.dump(CodecId.DATA_FILE, str(path), [threading.Lock()], BASE_TIME + 60, self.options)
        assert self.registry.load(CodecId.DATA_FILE, str(path)) == [None, {'id': 1}]
        assert os.path.getmtime(path) == BASE_TIME
        assert os.listdir(tmp_path) == ['Items.rvdata2']

    def test_successful_dump_leaves_no_temporary_files(self, tmp_path):
        path = tmp_path / 'Actors.yaml'
        self.registry.dump(CodecId.YAML_FILE, str(path), {'id': 1}, BASE_TIME, self.options)
        self.registry.dump(CodecId.YAML_FILE, str(path), {'id': 2}, BASE_TIME, self.options)
        assert os.listdir(tmp_path) == ['Actors.yaml']
        assert self.registry.load(CodecId.YAML_FILE, str(path)) == {'id': 2}
