"""Raw byte files, used for individual scripts."""

from typing import Any

from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.formats.base_format import BaseFormat


class RawFormat(BaseFormat):

    def load(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return f.read()

    def dump(self, path: str, data: Any, options: ConversionOptions) -> None:
        if isinstance(data, str):
            data = data.encode('utf-8')
        with open(path, 'wb') as f:
            f.write(data)
