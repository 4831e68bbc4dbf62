"""Errors raised while loading glTF documents and resolving base-color textures."""


class InvalidDocument(ValueError):
    """The glTF file parsed, but its cross references do not line up."""


class ResolveError(ValueError):
    """Base class for everything resolve_basecolor* can fail with."""


class AmbiguousMaterial(ResolveError):
    def __init__(self, material_count):
        self.material_count = material_count
        super().__init__("No material name specified and more than one material found")


class NoMaterials(ResolveError):
    def __init__(self):
        super().__init__("No materials found")


class MaterialNotFound(ResolveError):
    def __init__(self, material_name):
        self.material_name = material_name
        super().__init__(f"Material '{material_name}' not found")


class MaterialIndexNotFound(ResolveError):
    def __init__(self, material_index):
        self.material_index = material_index
        super().__init__(f"Material at index {material_index} was not found")


class TextureIndexNotFound(ResolveError):
    def __init__(self, texture_index):
        self.texture_index = texture_index
        super().__init__(f"Texture at index {texture_index} was not found")


class TextureWithoutImage(ResolveError):
    def __init__(self, texture_index):
        self.texture_index = texture_index
        super().__init__(f"Texture at index {texture_index} has no image source")


class ImageIndexNotFound(ResolveError):
    def __init__(self, image_index):
        self.image_index = image_index
        super().__init__(f"Image at index {image_index} was not found")


class NoBaseColorTexture(ResolveError):
    def __init__(self, material_index):
        self.material_index = material_index
        super().__init__(
            f"PBR Metallic Roughness base color texture of material at index {material_index} was not found"
        )


class NoBlob(ResolveError):
    def __init__(self):
        super().__init__("No gltf blob")


class BlobRangeOutOfBounds(ResolveError):
    def __init__(self, offset, length, blob_length):
        self.offset = offset
        self.length = length
        self.blob_length = blob_length
        super().__init__(
            f"Byte range [{offset}, {offset + length}) is outside the {blob_length} byte blob"
        )
