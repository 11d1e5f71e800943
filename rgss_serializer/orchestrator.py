"""Conversion orchestration: file discovery, staleness checks and dispatch."""

import dataclasses
import logging
import os

from rgss_serializer.codec_registry import CodecRegistry
from rgss_serializer.domain.constants import (
    DATA_EXT_BY_VERSION, SCRIPTS_BASE, SORTED_VERSIONS, YAML_EXT,
)
from rgss_serializer.domain.enums import CodecId, Direction, ProjectVersion
from rgss_serializer.domain.models import (
    ConversionJob, ConversionOptions, ConversionResult, FileSetSpec,
)
from rgss_serializer.errors import UnrecognizedDirectionError
from rgss_serializer.project_layout import ProjectLayout, change_extension, files_with_extension
from rgss_serializer.script_bundle import ScriptBundleCodec
from rgss_serializer.staleness import file_is_stale

log = logging.getLogger(__name__)

# Sub-jobs per direction; always data, then scripts, then saves
_DATA, _SCRIPTS, _SAVES = 'data', 'scripts', 'saves'

_PLAN: dict[Direction, tuple[tuple[str, bool], ...]] = {
    Direction.DATA_BIN_TO_TEXT: ((_DATA, True), (_SCRIPTS, True)),
    Direction.DATA_TEXT_TO_BIN: ((_DATA, False), (_SCRIPTS, False)),
    Direction.SAVE_BIN_TO_TEXT: ((_SAVES, True),),
    Direction.SAVE_TEXT_TO_BIN: ((_SAVES, False),),
    Direction.SCRIPTS_BIN_TO_TEXT: ((_SCRIPTS, True),),
    Direction.SCRIPTS_TEXT_TO_BIN: ((_SCRIPTS, False),),
    Direction.ALL_BIN_TO_TEXT: ((_DATA, True), (_SCRIPTS, True), (_SAVES, True)),
    Direction.ALL_TEXT_TO_BIN: ((_DATA, False), (_SCRIPTS, False), (_SAVES, False)),
}


def parse_direction(direction: Direction | str) -> Direction:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except ValueError:
        raise UnrecognizedDirectionError(f"Unrecognized direction :{direction}") from None


def parse_version(version: ProjectVersion | str) -> ProjectVersion:
    if isinstance(version, ProjectVersion):
        return version
    return ProjectVersion(version)


class ConversionOrchestrator:
    """Runs file-set, save and script bundle conversions for one project."""

    def __init__(
        self,
        registry: CodecRegistry | None = None,
        bundle_codec: ScriptBundleCodec | None = None,
    ):
        self.registry = registry or CodecRegistry()
        self.bundle_codec = bundle_codec or ScriptBundleCodec(self.registry)

    def process_file(
        self,
        src_file: str,
        dest_file: str,
        loader: CodecId,
        dumper: CodecId,
        options: ConversionOptions,
    ) -> bool:
        """Convert one file unless its destination is fresh. Returns True if converted."""
        name = os.path.basename(src_file)
        if not file_is_stale(src_file, dest_file, options.force):
            log.info("Skipping %s", name)
            return False

        log.info("Converting %s to %s", name, os.path.splitext(dest_file)[1])
        src_time = os.path.getmtime(src_file)
        data = self.registry.load(loader, src_file)
        self.registry.dump(dumper, dest_file, data, src_time, options)
        return True

    def convert(self, job: ConversionJob) -> ConversionResult:
        """Convert every matching file of ``job.source`` one by one."""
        return self._run_file_set(job, job.source.file_codec, job.destination.file_codec)

    def convert_saves(self, job: ConversionJob) -> ConversionResult:
        """Like :meth:`convert`, with the save codecs of each side."""
        return self._run_file_set(job, job.source.save_codec, job.destination.save_codec)

    def _run_file_set(self, job: ConversionJob, loader: CodecId, dumper: CodecId) -> ConversionResult:
        result = ConversionResult()
        files = [
            f for f in files_with_extension(job.source.directory, job.source.ext)
            if f not in job.source.exclude
        ]
        for file in files:
            src_file = os.path.join(job.source.directory, file)
            dest_file = os.path.join(job.destination.directory, change_extension(file, job.destination.ext))
            if self.process_file(src_file, dest_file, loader, dumper, job.options):
                result.converted.append(dest_file)
            else:
                result.skipped.append(src_file)
        return result

    def serialize(
        self,
        version: ProjectVersion | str,
        direction: Direction | str,
        directory: str,
        options: ConversionOptions | None = None,
    ) -> ConversionResult:
        """Run one top-level conversion over the project in ``directory``.

        Directories missing under the project root are created first.
        """
        direction = parse_direction(direction)
        version = parse_version(version)
        options = options or ConversionOptions()
        if version in SORTED_VERSIONS:
            options = dataclasses.replace(options, sort_keys=True)

        layout = ProjectLayout.from_directory(directory)
        layout.ensure_directories()

        data_ext = DATA_EXT_BY_VERSION[version]
        yaml_scripts = SCRIPTS_BASE + YAML_EXT
        bin_scripts = SCRIPTS_BASE + data_ext

        yaml_side = FileSetSpec(
            directory=layout.yaml,
            ext=YAML_EXT,
            exclude=frozenset({yaml_scripts}),
            file_codec=CodecId.YAML_FILE,
            save_codec=CodecId.YAML_FILE,
        )
        data_side = FileSetSpec(
            directory=layout.data,
            ext=data_ext,
            exclude=frozenset({bin_scripts}),
            file_codec=CodecId.DATA_FILE,
            save_codec=CodecId.SAVE_STREAM,
        )

        result = ConversionResult()
        for step, to_text in _PLAN[direction]:
            src, dest = (data_side, yaml_side) if to_text else (yaml_side, data_side)
            if step == _DATA:
                result.merge(self.convert(ConversionJob(src, dest, options)))
            elif step == _SCRIPTS:
                if to_text:
                    result.merge(self.bundle_codec.split(
                        os.path.join(layout.data, bin_scripts),
                        os.path.join(layout.yaml, yaml_scripts),
                        layout.script,
                        options,
                    ))
                else:
                    result.merge(self.bundle_codec.join(
                        os.path.join(layout.yaml, yaml_scripts),
                        os.path.join(layout.data, bin_scripts),
                        layout.script,
                        options,
                    ))
            else:
                save_src = dataclasses.replace(src, directory=layout.base)
                save_dest = dataclasses.replace(dest, directory=layout.base)
                result.merge(self.convert_saves(ConversionJob(save_src, save_dest, options)))
        return result


def serialize(
    version: ProjectVersion | str,
    direction: Direction | str,
    directory: str,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Convenience wrapper around :meth:`ConversionOrchestrator.serialize`."""
    return ConversionOrchestrator().serialize(version, direction, directory, options)
