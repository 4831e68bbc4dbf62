"""
Read-only view of a glTF/GLB document.

The loader projects a pygltflib GLTF2 object onto a handful of plain records:
materials, textures, images and meshes in file order, plus the GLB binary
chunk (the "blob") when there is one. Every image source ends up as one of
two variants:

  BufferViewSource  byte range inside a buffer (buffer 0 is the blob), with its MIME type
  UriSource         external path or data: URI, with an optional MIME type
"""

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from pygltflib import GLTF2

from gltf_errors import InvalidDocument

logger = logging.getLogger(__name__)

# Texture extensions that carry the image index outside of texture.source
TEXTURE_SOURCE_EXTENSIONS = ('EXT_texture_webp', 'KHR_texture_basisu', 'MSFT_texture_dds')


class BufferViewSource(NamedTuple):
    offset: int
    length: int
    mime_type: Optional[str]
    buffer: int = 0


class UriSource(NamedTuple):
    uri: str
    mime_type: Optional[str]


ImageSource = Union[BufferViewSource, UriSource]


class Material(NamedTuple):
    index: int
    name: Optional[str]
    base_color_texture: Optional[int]
    base_color_source: Optional[ImageSource]


class Texture(NamedTuple):
    index: int
    name: Optional[str]
    source: Optional[int]


class Image(NamedTuple):
    index: int
    name: Optional[str]
    source: ImageSource


class Mesh(NamedTuple):
    index: int
    name: Optional[str]


class Document:
    """Entities of one glTF file, in index order. Never mutated after loading."""

    def __init__(self, materials=(), textures=(), images=(), meshes=(), blob=None, base_dir=None):
        self.materials: List[Material] = list(materials)
        self.textures: List[Texture] = list(textures)
        self.images: List[Image] = list(images)
        self.meshes: List[Mesh] = list(meshes)
        self.blob: Optional[bytes] = blob
        self.base_dir: Optional[Path] = base_dir

    def __repr__(self):
        blob = f"{len(self.blob)} bytes" if self.blob is not None else "none"
        return (f"Document(materials={len(self.materials)}, textures={len(self.textures)}, "
                f"images={len(self.images)}, meshes={len(self.meshes)}, blob={blob})")


def texture_image_index(texture):
    """Image index of a pygltflib texture, looking into the image format extensions too."""
    if texture.source is not None:
        return texture.source
    extensions = texture.extensions or {}
    for name in TEXTURE_SOURCE_EXTENSIONS:
        ext = extensions.get(name)
        if ext and ext.get('source') is not None:
            return ext['source']
    return None


def image_source(gltf, image_index):
    image = gltf.images[image_index]
    if image.bufferView is not None:
        if not 0 <= image.bufferView < len(gltf.bufferViews):
            raise InvalidDocument(f"Image {image_index} refers to missing bufferView {image.bufferView}")
        bv = gltf.bufferViews[image.bufferView]
        offset = bv.byteOffset if bv.byteOffset is not None else 0
        return BufferViewSource(offset, bv.byteLength, image.mimeType, bv.buffer or 0)
    if image.uri is not None:
        return UriSource(image.uri, image.mimeType)
    raise InvalidDocument(f"Image {image_index} has neither uri nor bufferView")


def collect_base_color(gltf, material_index, material, images):
    pbr = material.pbrMetallicRoughness
    if pbr is None or pbr.baseColorTexture is None:
        return None, None
    texture_index = pbr.baseColorTexture.index
    if texture_index is None or not 0 <= texture_index < len(gltf.textures):
        raise InvalidDocument(f"Material {material_index} refers to missing texture {texture_index}")
    image_index = texture_image_index(gltf.textures[texture_index])
    if image_index is None:
        return texture_index, None
    return texture_index, images[image_index].source


def document_from_gltf(gltf: GLTF2, base_dir=None) -> Document:
    images = []
    for i, image in enumerate(gltf.images):
        images.append(Image(i, image.name, image_source(gltf, i)))

    textures = []
    for i, texture in enumerate(gltf.textures):
        source = texture_image_index(texture)
        if source is not None and not 0 <= source < len(images):
            raise InvalidDocument(f"Texture {i} refers to missing image {source}")
        textures.append(Texture(i, texture.name, source))

    materials = []
    for i, material in enumerate(gltf.materials):
        texture_index, source = collect_base_color(gltf, i, material, images)
        materials.append(Material(i, material.name, texture_index, source))

    meshes = [Mesh(i, mesh.name) for i, mesh in enumerate(gltf.meshes)]

    blob = gltf.binary_blob()
    if blob is not None:
        blob = bytes(blob)

    document = Document(materials, textures, images, meshes, blob, base_dir)
    logger.debug("loaded %r", document)
    return document


def load_document(path) -> Document:
    """Load a .glb or .gltf file from disk."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"glTF file not found: {path}")
    gltf = GLTF2().load(str(path))
    if gltf is None:
        raise InvalidDocument(f"Cannot load {path} (expected a .gltf or .glb file)")
    return document_from_gltf(gltf, base_dir=path.parent)


def load_document_from_bytes(data) -> Document:
    """Load a GLB container held in memory."""
    gltf = GLTF2().load_from_bytes(bytes(data))
    return document_from_gltf(gltf)
