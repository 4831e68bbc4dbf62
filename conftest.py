import io

import pytest
from PIL import Image as PILImage
from pygltflib import (
    GLTF2,
    Buffer,
    BufferView,
    Image,
    Material,
    Mesh,
    PbrMetallicRoughness,
    Texture,
    TextureInfo,
)


def make_png(width, height, color=(255, 0, 0, 255)):
    out = io.BytesIO()
    PILImage.new("RGBA", (width, height), color).save(out, format="PNG")
    return out.getvalue()


def make_jpeg(width, height, color=(0, 128, 255)):
    out = io.BytesIO()
    PILImage.new("RGB", (width, height), color).save(out, format="JPEG")
    return out.getvalue()


def textured(name, texture_index):
    return Material(
        name=name,
        pbrMetallicRoughness=PbrMetallicRoughness(baseColorTexture=TextureInfo(index=texture_index)),
    )


def build_glb(blob, **gltf_fields):
    """GLB container bytes with `blob` as the BIN chunk."""
    gltf = GLTF2(buffers=[Buffer(byteLength=len(blob))], **gltf_fields)
    gltf.set_binary_blob(blob)
    return b"".join(gltf.save_to_bytes())


@pytest.fixture
def png_image():
    return make_png(4, 2)


@pytest.fixture
def sample_glb(png_image):
    """
    Materials:
        0 Painted  -> texture 0 -> image 0 (bufferView, image/png)
        1 Wood     -> texture 1 -> image 1 (textures/wood.jpg)
        2 Plain    no base color texture
        3 <none>   -> texture 2 -> image 2 (textures/unnamed.png, no mimeType)
    """
    return build_glb(
        png_image,
        bufferViews=[BufferView(buffer=0, byteOffset=0, byteLength=len(png_image))],
        images=[
            Image(name="albedo", bufferView=0, mimeType="image/png"),
            Image(name="wood", uri="textures/wood.jpg", mimeType="image/jpeg"),
            Image(uri="textures/unnamed.png"),
        ],
        textures=[
            Texture(name="albedo_tex", source=0),
            Texture(name="wood_tex", source=1),
            Texture(source=2),
        ],
        materials=[
            textured("Painted", 0),
            textured("Wood", 1),
            Material(name="Plain", pbrMetallicRoughness=PbrMetallicRoughness()),
            textured(None, 2),
        ],
        meshes=[Mesh(name="Body"), Mesh()],
    )


@pytest.fixture
def sample_dir(tmp_path, sample_glb):
    (tmp_path / "model.glb").write_bytes(sample_glb)
    textures = tmp_path / "textures"
    textures.mkdir()
    (textures / "wood.jpg").write_bytes(make_jpeg(8, 6))
    (textures / "unnamed.png").write_bytes(make_png(2, 2))
    return tmp_path
