import base64
import io
import logging
from pathlib import Path
from typing import List, NamedTuple, Optional
from urllib.parse import unquote, urlparse

import numpy as np
from PIL import Image as PILImage

from gltf_document import BufferViewSource, UriSource
from gltf_errors import InvalidDocument

logger = logging.getLogger(__name__)


class DecodedImage(NamedTuple):
    index: int
    width: int
    height: int
    mode: str
    pixels: np.ndarray


def read_data_uri(uri):
    header, _, payload = uri.partition(',')
    if header.endswith(';base64'):
        return base64.b64decode(payload)
    return unquote(payload).encode('latin-1')


def image_bytes(document, source):
    """Raw (still encoded) bytes of an image source. Local files only, nothing is downloaded."""
    if isinstance(source, BufferViewSource):
        if document.blob is None or source.buffer != 0:
            raise InvalidDocument("Image stored in a bufferView outside the GLB blob")
        end = source.offset + source.length
        if source.offset < 0 or source.length < 0 or end > len(document.blob):
            raise InvalidDocument(f"Image range [{source.offset}, {end}) is outside the blob")
        return document.blob[source.offset:end]

    if not isinstance(source, UriSource):
        raise TypeError(f"Unknown image source: {source!r}")
    uri = source.uri
    if uri.startswith('data:'):
        return read_data_uri(uri)
    scheme = urlparse(uri).scheme
    if scheme and scheme != 'file' and len(scheme) > 1:
        raise InvalidDocument(f"Remote image URIs are not loaded: {uri}")
    base_dir: Optional[Path] = document.base_dir
    path = Path(unquote(urlparse(uri).path if scheme == 'file' else uri))
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    with open(path, 'rb') as f:
        return f.read()


def decode_images(document) -> List[DecodedImage]:
    decoded = []
    for image in document.images:
        data = image_bytes(document, image.source)
        with PILImage.open(io.BytesIO(data)) as pil_image:
            pil_image.load()
            pixels = np.asarray(pil_image)
            decoded.append(DecodedImage(image.index, pil_image.width, pil_image.height,
                                        pil_image.mode, pixels))
        logger.debug("decoded image %d: %dx%d %s", image.index,
                     decoded[-1].width, decoded[-1].height, decoded[-1].mode)
    return decoded
