"""
Resolve the base-color texture of a metallic-roughness material.

material -> texture -> image source -> bytes

Embedded images (bufferView into the GLB blob) come back as an EmbeddedImage
holding a copy of the byte range. Images stored behind a URI come back as an
ExternalImage; nothing is read or fetched for them.
"""

import logging
from typing import NamedTuple, Optional, Union

from gltf_document import BufferViewSource, UriSource
from gltf_errors import (
    AmbiguousMaterial,
    BlobRangeOutOfBounds,
    ImageIndexNotFound,
    MaterialIndexNotFound,
    MaterialNotFound,
    NoBaseColorTexture,
    NoBlob,
    NoMaterials,
    TextureIndexNotFound,
    TextureWithoutImage,
)

logger = logging.getLogger(__name__)

MaterialSelector = Optional[str]

MIME_EXTENSIONS = {
    'image/png': 'png',
    'image/jpeg': 'jpg',
    'image/webp': 'webp',
    'image/ktx2': 'ktx2',
    'image/vnd-ms.dds': 'dds',
}


class EmbeddedImage(NamedTuple):
    data: bytes
    mime_type: Optional[str]
    length: int


class ExternalImage(NamedTuple):
    uri: str
    mime_type: Optional[str]


ResolvedImage = Union[EmbeddedImage, ExternalImage]


def suggested_extension(mime_type):
    return MIME_EXTENSIONS.get(mime_type, 'bin')


def select_material_index(document, material_name: MaterialSelector = None) -> int:
    """Pick a material by exact (case-sensitive) name, or the only one when no name is given."""
    count = len(document.materials)
    if count == 0:
        raise NoMaterials()
    if material_name is not None:
        for material in document.materials:
            if material.name == material_name:
                return material.index
        raise MaterialNotFound(material_name)
    if count == 1:
        return 0
    raise AmbiguousMaterial(count)


def slice_blob(blob, offset, length):
    if offset < 0 or length < 0 or offset + length > len(blob):
        raise BlobRangeOutOfBounds(offset, length, len(blob))
    return bytes(blob[offset:offset + length])


def resolve_image_source(document, source) -> ResolvedImage:
    if isinstance(source, BufferViewSource):
        # only buffer 0 is backed by the GLB BIN chunk
        if document.blob is None or source.buffer != 0:
            raise NoBlob()
        data = slice_blob(document.blob, source.offset, source.length)
        return EmbeddedImage(data, source.mime_type, len(data))
    if isinstance(source, UriSource):
        return ExternalImage(source.uri, source.mime_type)
    raise TypeError(f"Unknown image source: {source!r}")


def resolve_basecolor_by_material_index(document, material_index: int) -> ResolvedImage:
    if not 0 <= material_index < len(document.materials):
        raise MaterialIndexNotFound(material_index)
    material = document.materials[material_index]
    if material.base_color_source is None:
        raise NoBaseColorTexture(material_index)
    logger.debug("material %d -> texture %s -> %r",
                 material_index, material.base_color_texture, material.base_color_source)
    return resolve_image_source(document, material.base_color_source)


def resolve_basecolor(document, material_name: MaterialSelector = None) -> ResolvedImage:
    material_index = select_material_index(document, material_name)
    logger.debug("selected material %d for %r", material_index, material_name)
    return resolve_basecolor_by_material_index(document, material_index)


def resolve_basecolor_by_texture_index(document, decoded_images, texture_index: int):
    """
    Look up the decoded image behind a texture.

    Args:
        document: loaded Document
        decoded_images: images decoded eagerly, aligned by image index
        texture_index: index into document.textures

    Returns:
        DecodedImage: carries width and height of the pixel data
    """
    if not 0 <= texture_index < len(document.textures):
        raise TextureIndexNotFound(texture_index)
    image_index = document.textures[texture_index].source
    if image_index is None:
        raise TextureWithoutImage(texture_index)
    logger.debug("texture %d -> image %d", texture_index, image_index)
    if not 0 <= image_index < len(decoded_images):
        raise ImageIndexNotFound(image_index)
    return decoded_images[image_index]
