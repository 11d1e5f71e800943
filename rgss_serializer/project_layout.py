"""Project directory layout."""
import os
from dataclasses import dataclass

from rgss_serializer.domain.constants import DATA_DIR_NAME, SCRIPT_DIR_NAME, YAML_DIR_NAME
from rgss_serializer.errors import MissingSourceError


def change_extension(filename: str, new_ext: str) -> str:
    """Basename of ``filename`` with its extension replaced."""
    return os.path.splitext(os.path.basename(filename))[0] + new_ext


def files_with_extension(directory: str, ext: str) -> list[str]:
    """Sorted names of regular files in ``directory`` ending in ``ext``."""
    return sorted(
        name for name in os.listdir(directory)
        if os.path.splitext(name)[1] == ext and os.path.isfile(os.path.join(directory, name))
    )


@dataclass
class ProjectLayout:
    """Resolved directories of one game project."""
    base: str
    data: str
    yaml: str
    script: str

    @classmethod
    def from_directory(cls, directory: str) -> 'ProjectLayout':
        if not os.path.exists(directory):
            raise MissingSourceError(f"{directory} not found", directory)
        base = os.path.realpath(directory)
        return cls(
            base=base,
            data=os.path.join(base, DATA_DIR_NAME),
            yaml=os.path.join(base, YAML_DIR_NAME),
            script=os.path.join(base, SCRIPT_DIR_NAME),
        )

    def ensure_directories(self) -> None:
        for d in (self.base, self.data, self.yaml, self.script):
            os.makedirs(d, exist_ok=True)
